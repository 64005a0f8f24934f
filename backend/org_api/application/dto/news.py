"""News DTOs for the /news listing."""

from datetime import datetime
from typing import Optional

from org_api.application.dto.base import CamelModel


class AuthorDTO(CamelModel):
    id: str
    name: Optional[str] = None
    username: Optional[str] = None
    image: Optional[str] = None


class PostTagDTO(CamelModel):
    title: str
    slug: str


class NewsDTO(CamelModel):
    id: str
    title: str
    meta_title: str
    slug: str
    content: str
    image: Optional[str] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    author: Optional[AuthorDTO] = None
    post_tags: list[PostTagDTO] = []
