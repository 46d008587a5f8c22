"""
Business logic for library books.

A book's ``available_copies`` moves between ``0`` and
``total_copies`` and nowhere else:

* ``lend_copy`` takes ``n -> n - 1`` and requires ``n > 0``; otherwise
  it fails with ``UNAVAILABLE``.
* ``return_copy`` takes ``n -> n + 1`` and requires
  ``n < total_copies``; otherwise it fails with
  ``INVARIANT_VIOLATION`` (more copies returned than were lent).

A failed guard raises before anything is saved, so the stored book is
unchanged.  Both checks run under the repository's write lock, so two
concurrent loans of the last copy cannot both succeed.

The generic ``update`` refuses both counters; they change only
through ``lend_copy``, ``return_copy`` and ``add_copies``.
"""

import logging
from typing import List, Optional

from catalog_api.app.core.errors import CatalogError, ErrorKind
from catalog_api.app.repositories.indexed import IndexedRepository
from catalog_api.app.schemas.book import Book, LibraryStatistics

from .base import CrudService

logger = logging.getLogger(__name__)


class BookService(CrudService[Book]):
    """Service for the library catalogue and its copy counters."""

    read_only_fields = frozenset({"total_copies", "available_copies"})

    def __init__(self, repository: IndexedRepository[Book]) -> None:
        super().__init__(repository)

    def lend_copy(self, book_id: int) -> Book:
        def lend(book: Book) -> Book:
            if book.available_copies <= 0:
                logger.warning("No copies of book %s left to lend", book_id)
                raise CatalogError(
                    ErrorKind.UNAVAILABLE,
                    f"No copies of '{book.title}' are available",
                    entity=self.entity_name,
                    entity_id=book_id,
                )
            return book.model_copy(update={"available_copies": book.available_copies - 1})

        book = self._mutate(book_id, lend)
        logger.info("Lent a copy of book %s (%s/%s left)", book_id, book.available_copies, book.total_copies)
        return book

    def return_copy(self, book_id: int) -> Book:
        def give_back(book: Book) -> Book:
            if book.available_copies >= book.total_copies:
                logger.warning("Over-return of book %s rejected", book_id)
                raise CatalogError(
                    ErrorKind.INVARIANT_VIOLATION,
                    f"All {book.total_copies} copies of '{book.title}' are already on the shelf",
                    entity=self.entity_name,
                    entity_id=book_id,
                )
            return book.model_copy(update={"available_copies": book.available_copies + 1})

        book = self._mutate(book_id, give_back)
        logger.info("Returned a copy of book %s (%s/%s available)", book_id, book.available_copies, book.total_copies)
        return book

    def add_copies(self, book_id: int, count: int) -> Book:
        """Shelve ``count`` new copies; both counters grow by ``count``."""
        if count <= 0:
            raise CatalogError.invalid(
                "Number of copies to add must be positive", entity=self.entity_name, entity_id=book_id
            )
        book = self._mutate(
            book_id,
            lambda b: b.model_copy(
                update={
                    "total_copies": b.total_copies + count,
                    "available_copies": b.available_copies + count,
                }
            ),
        )
        logger.info("Added %s copies to book %s", count, book_id)
        return book

    def list_by_category(self, category: str) -> List[Book]:
        return self.repository.find_by_category(category)

    def list_available(self) -> List[Book]:
        """Books with at least one copy on the shelf."""
        return self.repository.find_where(lambda b: b.available_copies > 0)

    def search_by_title(self, fragment: str) -> List[Book]:
        """Case‑insensitive substring search on the title."""
        needle = self._needle(fragment, "title")
        return self.repository.find_where(lambda b: needle in b.title.lower())

    def search_by_author(self, fragment: str) -> List[Book]:
        needle = self._needle(fragment, "author")
        return self.repository.find_where(lambda b: needle in (b.author or "").lower())

    def statistics(self) -> LibraryStatistics:
        books = self.repository.find_all()
        total = sum(b.total_copies for b in books)
        available = sum(b.available_copies for b in books)
        return LibraryStatistics(
            titles=len(books),
            total_copies=total,
            available_copies=available,
            lent_copies=total - available,
        )

    def _needle(self, fragment: Optional[str], field_name: str) -> str:
        if fragment is None or not fragment.strip():
            raise CatalogError.invalid(f"Search {field_name} must not be empty", entity=self.entity_name)
        return fragment.strip().lower()
