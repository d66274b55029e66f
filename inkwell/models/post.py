"""Blog post database models and their tag/category link tables."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, Index, Text, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from inkwell.configs.settings import MAX_ABSTRACT_LENGTH, MAX_SLUG_LENGTH, MAX_TITLE_LENGTH
from inkwell.models.page import utc_now


class PostDB(SQLModel, table=True):
    """Blog post stored in the posts table."""

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (Index("ix_posts_published_pubdate", "is_published", "pub_date_utc"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Post title",
    )
    slug: str = Field(
        sa_column=Column(String(MAX_SLUG_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(String(64)),
        description="Display name of the author",
    )
    post_content: str = Field(
        default="",
        sa_column=Column(Text, nullable=False),
        description="Post body as written in the editor",
    )
    content_abstract: str = Field(
        default="",
        sa_column=Column(String(MAX_ABSTRACT_LENGTH), nullable=False),
        description="Post excerpt",
    )
    content_language_code: str | None = Field(
        default=None,
        sa_column=Column(String(8)),
    )
    origin_link: str | None = Field(default=None, sa_column=Column(String(256)))
    hero_image_url: str | None = Field(default=None, sa_column=Column(String(256)))

    comment_enabled: bool = Field(default=True, sa_column=Column(Boolean, nullable=False))
    is_feed_included: bool = Field(default=True, sa_column=Column(Boolean, nullable=False))
    is_featured: bool = Field(default=False, sa_column=Column(Boolean, nullable=False))
    is_published: bool = Field(default=False, sa_column=Column(Boolean, nullable=False))
    is_outdated: bool = Field(default=False, sa_column=Column(Boolean, nullable=False))

    pub_date_utc: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="First publication timestamp",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
    )


class PostTagLink(SQLModel, table=True):
    """Association between posts and tags."""

    __tablename__ = cast("declared_attr[str]", "post_tags")

    post_id: UUID = Field(
        sa_column=Column(
            "post_id",
            Uuid,
            ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    tag_id: UUID = Field(
        sa_column=Column(
            "tag_id",
            Uuid,
            ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
            index=True,
        ),
    )


class PostCategoryLink(SQLModel, table=True):
    """Association between posts and categories."""

    __tablename__ = cast("declared_attr[str]", "post_categories")

    post_id: UUID = Field(
        sa_column=Column(
            "post_id",
            Uuid,
            ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    category_id: UUID = Field(
        sa_column=Column(
            "category_id",
            Uuid,
            ForeignKey("categories.id", ondelete="CASCADE"),
            primary_key=True,
            index=True,
        ),
    )
