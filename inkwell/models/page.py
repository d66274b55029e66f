"""Custom page database model."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from inkwell.configs.settings import MAX_META_DESCRIPTION_LENGTH, MAX_SLUG_LENGTH, MAX_TITLE_LENGTH


def utc_now() -> datetime:
    return datetime.now(tz=UTC).replace(microsecond=0)


class PageDB(SQLModel, table=True):
    """
    Custom page stored in the pages table.

    Pages are standalone documents (about, contact, ...) addressed by a
    unique slug and rendered as raw HTML with optional page-level CSS.
    """

    __tablename__ = cast("declared_attr[str]", "pages")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Page ID",
    )
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Page title",
    )
    slug: str = Field(
        sa_column=Column(String(MAX_SLUG_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
    meta_description: str | None = Field(
        default=None,
        sa_column=Column(String(MAX_META_DESCRIPTION_LENGTH)),
        description="Meta description for search engines",
    )
    raw_html_content: str = Field(
        default="",
        sa_column=Column(Text, nullable=False),
        description="Page body as raw HTML",
    )
    css_content: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Page-level stylesheet",
    )
    hide_sidebar: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
    )
    is_published: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False, index=True),
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )
