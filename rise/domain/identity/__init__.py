"""Identity domain layer."""

from rise.domain.identity.principal import Principal

__all__ = ["Principal"]
