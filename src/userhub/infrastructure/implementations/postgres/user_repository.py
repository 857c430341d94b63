"""
PostgreSQL user repository.

Reads user rows with SQLAlchemy Core. A missing row surfaces as
``NoResultFound`` and is classified as ``NotFoundError`` by the session
manager.
"""

from sqlalchemy import select

from userhub.domain.value_objects import BirthDate, UserId
from userhub.infrastructure.database import DatabaseSessionManager
from userhub.infrastructure.repositories import UserProfile, UserRepository
from userhub.infrastructure.schema import users


class PostgresUserRepository(UserRepository):
    """User repository backed by the ``users`` table."""

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    async def get_profile(self, user_id: UserId) -> UserProfile:
        stmt = select(
            users.c.user_id,
            users.c.public_id,
            users.c.user_name,
            users.c.first_name,
            users.c.last_name,
            users.c.email,
            users.c.phone,
            users.c.birth_date,
        ).where(users.c.user_id == int(user_id))

        async with self.db.session() as session:
            result = await session.execute(stmt)
            row = result.one()

        return UserProfile(
            user_id=UserId(row.user_id),
            public_id=row.public_id,
            user_name=row.user_name,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            phone=row.phone,
            birth_date=(
                BirthDate.from_date(row.birth_date)
                if row.birth_date is not None
                else None
            ),
        )
