"""
Custom page schemas.

``PageDetail`` is what the content cache stores for the page partition;
views are derived from it on every request so cached entries never carry
request-specific state.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from inkwell.configs.settings import MAX_META_DESCRIPTION_LENGTH, MAX_SLUG_LENGTH, MAX_TITLE_LENGTH
from inkwell.schemas.base import SLUG_PATTERN, CamelModel
from inkwell.utils.css import is_valid_css


class PageEditModel(CamelModel):
    """Page create/edit form. An absent id creates a new page."""

    id: UUID | None = Field(default=None, description="Page ID, omitted for new pages")
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, examples=["About"])
    slug: str = Field(
        ...,
        min_length=1,
        max_length=MAX_SLUG_LENGTH,
        pattern=SLUG_PATTERN,
        examples=["about"],
    )
    meta_description: str | None = Field(default=None, max_length=MAX_META_DESCRIPTION_LENGTH)
    raw_html_content: str = Field(default="", description="Page body as raw HTML")
    css_content: str | None = Field(default=None, description="Page-level stylesheet")
    hide_sidebar: bool = False
    is_published: bool = False

    @field_validator("slug")
    @classmethod
    def lower_slug(cls, value: str) -> str:
        """Slugs are stored lower-cased so lookups and cache keys agree."""
        return value.lower()


class PageDetail(CamelModel):
    """Full page data as loaded from the database."""

    id: UUID
    title: str
    slug: str
    meta_description: str | None = None
    raw_html_content: str = ""
    css_content: str | None = None
    hide_sidebar: bool = False
    is_published: bool = False
    created_at: datetime
    updated_at: datetime | None = None


class PageView(CamelModel):
    """Rendered page returned to readers."""

    title: str
    raw_html_content: str
    hide_sidebar: bool
    meta_description: str | None = None
    css: str | None = None
    is_draft_preview: bool = False

    @classmethod
    def from_detail(cls, page: PageDetail, *, is_draft_preview: bool = False) -> "PageView":
        # Stored CSS that no longer parses is left out rather than served
        css = page.css_content.strip() if page.css_content else None
        if css and not is_valid_css(css):
            css = None
        return cls(
            title=page.title,
            raw_html_content=page.raw_html_content,
            hide_sidebar=page.hide_sidebar,
            meta_description=page.meta_description,
            css=css or None,
            is_draft_preview=is_draft_preview,
        )


class PageSegment(CamelModel):
    """Row of the page management list."""

    id: UUID
    title: str
    slug: str
    is_published: bool
    created_at: datetime


class PageSaveResponse(CamelModel):
    page_id: UUID


class PageDeleteRequest(CamelModel):
    """Delete form; the slug falls back to the stored one when omitted."""

    page_id: UUID
    slug: str | None = None
