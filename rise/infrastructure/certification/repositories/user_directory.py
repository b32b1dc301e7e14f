"""Read-only lookups against the users table."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from rise.domain.common.value_objects import UserId
from rise.models import User as UserORM


class UserDirectory:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_display_name(self, user_id: UserId) -> str | None:
        """Stored name of the user, or None when the user does not exist."""
        stmt = select(UserORM.name).where(UserORM.id == user_id.value)
        return self.db.execute(stmt).scalar_one_or_none()
