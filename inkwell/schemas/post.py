"""Blog post schemas for the public view and the admin editor."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from inkwell.configs.settings import MAX_ABSTRACT_LENGTH, MAX_SLUG_LENGTH, MAX_TITLE_LENGTH
from inkwell.schemas.base import SLUG_PATTERN, CamelModel

# Marker appended to auto-generated abstracts: a no-break space and an ellipsis
ABSTRACT_ELLIPSIS = "\u00a0\u2026"


class PostDetail(CamelModel):
    """Published post as cached in the post partition."""

    id: UUID
    title: str
    slug: str
    author: str | None = None
    post_content: str
    content_abstract: str
    content_language_code: str | None = None
    hero_image_url: str | None = None
    origin_link: str | None = None
    comment_enabled: bool = True
    is_featured: bool = False
    is_published: bool = False
    is_outdated: bool = False
    pub_date_utc: datetime | None = None
    tags: list[str] = []


class PostEditModel(CamelModel):
    """
    Post editor form.

    ``tags`` is the comma separated list of tag display names as typed in the
    editor; ``selected_category_ids`` carries the checked categories back.
    """

    post_id: UUID | None = None
    title: str = Field(default="", max_length=MAX_TITLE_LENGTH)
    slug: str = Field(default="", max_length=MAX_SLUG_LENGTH)
    author: str | None = None
    editor_content: str = ""
    enable_comment: bool = True
    feed_included: bool = True
    language_code: str | None = None
    abstract: str = Field(default="", max_length=MAX_ABSTRACT_LENGTH)
    featured: bool = False
    origin_link: str | None = None
    hero_image_url: str | None = None
    is_outdated: bool = False
    is_published: bool = False
    publish_date: datetime | None = None
    tags: str = ""
    selected_category_ids: list[UUID] = []

    def tag_names(self) -> list[str]:
        """Split the tag field into distinct, trimmed display names."""
        names: list[str] = []
        for raw in self.tags.split(","):
            name = raw.strip()
            if name and name.lower() not in {n.lower() for n in names}:
                names.append(name)
        return names


class PostSaveModel(PostEditModel):
    """Post editor submission; stricter than the form used for rendering."""

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    slug: str = Field(..., min_length=1, max_length=MAX_SLUG_LENGTH, pattern=SLUG_PATTERN)
    editor_content: str = Field(..., min_length=1)

    @field_validator("slug")
    @classmethod
    def lower_slug(cls, value: str) -> str:
        return value.lower()


class CategoryCheckBox(CamelModel):
    id: UUID
    display_text: str
    is_checked: bool = False


class PostEditView(CamelModel):
    """Everything the post editor needs to render."""

    view_model: PostEditModel
    category_list: list[CategoryCheckBox] = []


class PostSaveResponse(CamelModel):
    post_id: UUID
