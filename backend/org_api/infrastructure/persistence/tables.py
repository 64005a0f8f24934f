"""
Table metadata for the read side (SQLAlchemy Core).

Mirrors prisma/schema.prisma: Prisma owns migrations, these definitions are
only used to build SELECT statements (and to create a throwaway schema in
tests). Many-to-many link tables keep Prisma's implicit `_AToB` names.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)

metadata = MetaData()


def _timestamps() -> list[Column]:
    return [
        Column("created_at", DateTime, nullable=False, server_default=func.now()),
        Column("updated_at", DateTime, nullable=False, server_default=func.now()),
    ]


periods = Table(
    "periods",
    metadata,
    Column("id", String, primary_key=True),
    Column("logo", String, nullable=False, server_default=""),
    Column("name", String, nullable=False, unique=True),
    Column("description", Text),
    Column("year", Integer, nullable=False, unique=True),
    *_timestamps(),
)

departments = Table(
    "departments",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("acronym", String, nullable=False),
    Column("image", String),
    Column("description", Text),
    Column("type", String, nullable=False, server_default="BE"),
    Column("period_year", Integer, ForeignKey("periods.year"), nullable=False),
    *_timestamps(),
)

programs = Table(
    "programs",
    metadata,
    Column("id", String, primary_key=True),
    Column("content", Text, nullable=False),
    Column("department_id", String, ForeignKey("departments.id"), nullable=False),
)

positions = Table(
    "positions",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    # NULL for organization-wide positions
    Column("department_id", String, ForeignKey("departments.id")),
    *_timestamps(),
)

users = Table(
    "users",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String),
    Column("email", String, unique=True),
    Column("image", String),
    Column("username", String, unique=True),
    Column("bio", Text),
    Column("role", String, nullable=False, server_default="member"),
    *_timestamps(),
)

posts = Table(
    "posts",
    metadata,
    Column("id", String, primary_key=True),
    Column("author_id", String, ForeignKey("users.id"), nullable=False),
    Column("title", String, nullable=False),
    Column("meta_title", String, nullable=False),
    Column("slug", String, nullable=False),
    Column("content", Text, nullable=False),
    Column("raw_html", Text, nullable=False, server_default=""),
    Column("image", String),
    Column("published_at", DateTime),
    *_timestamps(),
)

post_tags = Table(
    "post_tags",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String, nullable=False, unique=True),
    Column("slug", String, nullable=False, unique=True),
    Column("parent_id", String, ForeignKey("post_tags.id")),
    *_timestamps(),
)

post_to_post_tag = Table(
    "_PostToPostTag",
    metadata,
    Column("post_id", String, ForeignKey("posts.id"), nullable=False),
    Column("post_tag_id", String, ForeignKey("post_tags.id"), nullable=False),
)

position_to_user = Table(
    "_PositionToUser",
    metadata,
    Column("position_id", String, ForeignKey("positions.id"), nullable=False),
    Column("user_id", String, ForeignKey("users.id"), nullable=False),
)

department_to_user = Table(
    "_DepartmentToUser",
    metadata,
    Column("department_id", String, ForeignKey("departments.id"), nullable=False),
    Column("user_id", String, ForeignKey("users.id"), nullable=False),
)

period_to_user = Table(
    "_PeriodToUser",
    metadata,
    Column("period_id", String, ForeignKey("periods.id"), nullable=False),
    Column("user_id", String, ForeignKey("users.id"), nullable=False),
)
