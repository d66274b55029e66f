"""Tag database model."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from inkwell.configs.settings import MAX_TAG_LENGTH


class TagDB(SQLModel, table=True):
    """
    Tag stored in the tags table.

    ``normalized_name`` is the lower-cased, hyphenated form used in URLs and
    for de-duplication; ``display_name`` keeps the author's spelling.
    """

    __tablename__ = cast("declared_attr[str]", "tags")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    display_name: str = Field(sa_column=Column(String(MAX_TAG_LENGTH), nullable=False))
    normalized_name: str = Field(
        sa_column=Column(String(MAX_TAG_LENGTH), unique=True, nullable=False, index=True),
    )
