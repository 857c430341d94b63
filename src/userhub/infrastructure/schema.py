"""
Database schema (SQLAlchemy Core).

Mirrors the SQL migrations: users, user_auths and sessions.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Identity,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    Uuid,
    func,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("user_id", BigInteger, Identity(), primary_key=True),
    Column("public_id", String(21), nullable=False, unique=True),
    Column("randomart", Text, nullable=False),
    Column("user_name", String(64), nullable=False, unique=True),
    Column("first_name", String(64)),
    Column("last_name", String(64)),
    Column("email", String(254), unique=True),
    Column("phone", String(16), unique=True),
    Column("birth_date", Date),
    Column("status", SmallInteger, nullable=False, server_default="0"),
    Column("role", SmallInteger, nullable=False, server_default="0"),
    Column("last_login_at", DateTime(timezone=True)),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

user_auths = Table(
    "user_auths",
    metadata,
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("current_hashed_password", String(128), nullable=False),
    Column("prev_hashed_password_1", String(128)),
    Column("prev_hashed_password_2", String(128)),
    Column("login_fail_times", SmallInteger, nullable=False, server_default="0"),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

sessions = Table(
    "sessions",
    metadata,
    Column("session_id", Uuid, primary_key=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column("expires_at", DateTime(timezone=True), nullable=False),
)
