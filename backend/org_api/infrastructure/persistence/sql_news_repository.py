"""
SQL News Repository - Implements NewsRepository port.

News = published posts (published_at IS NOT NULL) carrying the news tag.
The tag condition is an EXISTS in the page predicate and is repeated on the
tag join, so `post_tag__*` columns only ever hold the news tag.
"""

import logging

from sqlalchemy import ColumnElement, Select, and_, select

from org_api.domain.ports import Database
from org_api.domain.ports.repositories import NewsRepository
from org_api.domain.value_objects import NewsFilters, Pagination, RowPage
from org_api.infrastructure.persistence.sql_common import (
    count_distinct,
    directed,
    fetch_page,
    prefixed,
)
from org_api.infrastructure.persistence.tables import (
    post_tags,
    post_to_post_tag,
    posts,
    users,
)

logger = logging.getLogger(__name__)

POST_COLUMNS = (
    "id",
    "title",
    "meta_title",
    "slug",
    "content",
    "image",
    "published_at",
    "created_at",
    "updated_at",
    "author_id",
)
AUTHOR_COLUMNS = ("id", "name", "username", "image")
POST_TAG_COLUMNS = ("id", "title", "slug")


def _predicates(filters: NewsFilters) -> list[ColumnElement]:
    link = post_to_post_tag.alias("ptt")
    tag = post_tags.alias("tt")
    tagged = (
        select(link.c.post_id)
        .join(tag, tag.c.id == link.c.post_tag_id)
        .where(link.c.post_id == posts.c.id, tag.c.title == filters.tag_title)
        .exists()
    )
    clauses = [posts.c.published_at.is_not(None), tagged]
    if filters.search:
        clauses.append(posts.c.title.icontains(filters.search, autoescape=True))
    return clauses


def build_page_statement(filters: NewsFilters, pagination: Pagination) -> Select:
    window = (
        select(*(posts.c[name] for name in POST_COLUMNS))
        .where(*_predicates(filters))
        .order_by(directed(posts.c.published_at, filters.order), posts.c.id)
        .limit(pagination.limit)
        .offset(pagination.offset)
        .subquery("p")
    )
    author = users.alias("a")
    link = post_to_post_tag.alias("pt")
    tag = post_tags.alias("t")
    return (
        select(
            *window.c,
            *prefixed(author, AUTHOR_COLUMNS, "author__"),
            *prefixed(tag, POST_TAG_COLUMNS, "post_tag__"),
        )
        .select_from(
            window.outerjoin(author, author.c.id == window.c.author_id)
            .outerjoin(link, link.c.post_id == window.c.id)
            .outerjoin(
                tag,
                and_(tag.c.id == link.c.post_tag_id, tag.c.title == filters.tag_title),
            )
        )
        .order_by(
            directed(window.c.published_at, filters.order),
            window.c.id,
            tag.c.slug,
        )
    )


def build_count_statement(filters: NewsFilters) -> Select:
    return count_distinct(posts.c.id).where(*_predicates(filters))


class SqlNewsRepository(NewsRepository):
    _db: Database

    def __init__(self, db: Database):
        self._db = db

    async def list_page(self, filters: NewsFilters, pagination: Pagination) -> RowPage:
        page = build_page_statement(filters, pagination)
        logger.debug("News page query: %s", page)
        return await fetch_page(self._db, page, build_count_statement(filters))
