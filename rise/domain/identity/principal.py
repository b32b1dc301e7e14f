"""Authenticated caller resolved by the identity provider."""

from dataclasses import dataclass

from rise.domain.common.value_objects import UserId

DEFAULT_ROLE = "student"


@dataclass(frozen=True)
class Principal:
    """The user on whose behalf a request runs."""

    user_id: UserId
    role: str = DEFAULT_ROLE
