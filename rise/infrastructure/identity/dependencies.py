"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from rise.domain.common.value_objects import UserId
from rise.domain.identity.principal import Principal
from rise.exceptions import CredentialsException
from rise.infrastructure.identity.services.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


async def get_current_principal(token: Annotated[str, Depends(oauth2_scheme)]) -> Principal:
    """
    Resolve the caller from the bearer token.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Principal carrying the user id and role from the token

    Raises:
        CredentialsException: If the token is missing, expired or malformed
    """
    verified = verify_access_token(token)
    if verified is None:
        raise CredentialsException
    user_id, role = verified
    return Principal(user_id=UserId(user_id), role=role)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
