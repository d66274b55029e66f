"""Friend link database model."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class FriendLinkDB(SQLModel, table=True):
    """Link to a friendly site shown in the blog sidebar."""

    __tablename__ = cast("declared_attr[str]", "friend_links")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    title: str = Field(sa_column=Column(String(64), nullable=False))
    link_url: str = Field(sa_column=Column(String(256), nullable=False))
