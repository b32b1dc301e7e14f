"""Protocol for looking up learner display data."""

from typing import Protocol

from rise.domain.common.value_objects import UserId


class UserDirectoryProtocol(Protocol):
    """Read-only access to user names kept by the identity provider."""

    def find_display_name(self, user_id: UserId) -> str | None: ...
