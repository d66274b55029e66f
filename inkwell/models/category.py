"""Category database model."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class CategoryDB(SQLModel, table=True):
    """Category stored in the categories table."""

    __tablename__ = cast("declared_attr[str]", "categories")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    display_name: str = Field(sa_column=Column(String(64), nullable=False))
    route_name: str = Field(
        sa_column=Column(String(64), unique=True, nullable=False, index=True),
        description="URL segment of the category (unique)",
    )
    note: str | None = Field(default=None, sa_column=Column(String(128)))
