from .token_service import create_access_token, verify_access_token

__all__ = ["create_access_token", "verify_access_token"]
