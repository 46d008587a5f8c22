"""
Pydantic models for library books.

A book is an inventory entity: it carries ``total_copies`` and
``available_copies`` and must always satisfy
``0 <= available_copies <= total_copies``.  Lending and returning
copies are service operations; the request bodies here only describe
the catalogue fields.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from .base import Entity


class Book(Entity):
    """A title held by the library, with its copy counters."""

    entity_name: ClassVar[str] = "Book"

    title: str = Field(..., examples=["Dune"])
    author: Optional[str] = Field(None, examples=["Frank Herbert"])
    isbn: Optional[str] = Field(None, examples=["978-0441013593"])
    category: str = Field(..., examples=["Science Fiction"])
    total_copies: int = Field(..., examples=[3])
    available_copies: int = Field(..., examples=[3])

    @property
    def lent_copies(self) -> int:
        return self.total_copies - self.available_copies

    def ensure_valid(self) -> None:
        self._require_text("title")
        self._require_text("category")
        if self.total_copies < 0:
            raise self._invalid("Total copies must not be negative")
        if not 0 <= self.available_copies <= self.total_copies:
            raise self._invalid(
                f"Available copies must be between 0 and {self.total_copies}, got {self.available_copies}"
            )


class BookCreate(BaseModel):
    """Schema for adding a book.

    ``available_copies`` defaults to ``total_copies`` when omitted, i.e.
    a new title starts with every copy on the shelf.
    """

    title: str
    author: Optional[str] = None
    isbn: Optional[str] = None
    category: str
    total_copies: int = Field(1, examples=[3])
    available_copies: Optional[int] = None

    def to_entity(self) -> Book:
        data = self.model_dump()
        if data["available_copies"] is None:
            data["available_copies"] = data["total_copies"]
        return Book(**data)


class BookUpdate(BaseModel):
    """Schema for updating a book.  Only provided fields are changed.

    The copy counters are not part of this schema: they only move
    through lending, returning and adding copies.
    """

    model_config = {"extra": "forbid"}

    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    category: str | None = None


class CopiesAdded(BaseModel):
    count: int = Field(..., examples=[2], description="Number of new copies to shelve")


class LibraryStatistics(BaseModel):
    """Copy totals over the whole catalogue."""

    titles: int = 0
    total_copies: int = 0
    available_copies: int = 0
    lent_copies: int = 0
