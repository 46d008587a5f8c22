"""
Book endpoints for API v1.

Routes for the library catalogue and its copy counters.  Lending a
book with no copies left answers 409 (``unavailable``); returning a
copy that was never lent answers 409 (``invariant_violation``).  In
both cases the stored book is left unchanged.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from catalog_api.app.api.dependencies import get_book_service
from catalog_api.app.schemas.book import Book, BookCreate, BookUpdate, CopiesAdded, LibraryStatistics
from catalog_api.app.services.book_service import BookService

router = APIRouter()


@router.get("/", response_model=List[Book])
def list_books(service: BookService = Depends(get_book_service)) -> List[Book]:
    return service.list_all()


@router.get("/available", response_model=List[Book])
def list_available_books(service: BookService = Depends(get_book_service)) -> List[Book]:
    """Return the books with at least one copy on the shelf."""
    return service.list_available()


@router.get("/search/title", response_model=List[Book])
def search_books_by_title(
    q: str = Query(..., description="Case-insensitive part of the title"),
    service: BookService = Depends(get_book_service),
) -> List[Book]:
    return service.search_by_title(q)


@router.get("/search/author", response_model=List[Book])
def search_books_by_author(
    q: str = Query(..., description="Case-insensitive part of the author's name"),
    service: BookService = Depends(get_book_service),
) -> List[Book]:
    return service.search_by_author(q)


@router.get("/statistics", response_model=LibraryStatistics)
def library_statistics(service: BookService = Depends(get_book_service)) -> LibraryStatistics:
    """Number of titles and copy totals over the whole catalogue."""
    return service.statistics()


@router.get("/category/{category}", response_model=List[Book])
def list_books_by_category(category: str, service: BookService = Depends(get_book_service)) -> List[Book]:
    return service.list_by_category(category)


@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, service: BookService = Depends(get_book_service)) -> Book:
    """Retrieve a single book by ID."""
    return service.get_by_id(book_id)


@router.post("/", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(book_in: BookCreate, service: BookService = Depends(get_book_service)) -> Book:
    """Add a title to the catalogue.

    When ``available_copies`` is omitted every copy starts on the
    shelf.
    """
    return service.create(book_in.to_entity())


@router.put("/{book_id}", response_model=Book)
def update_book(book_id: int, book_in: BookUpdate, service: BookService = Depends(get_book_service)) -> Book:
    """Update catalogue fields.  The copy counters cannot be set here."""
    return service.update(book_id, book_in.model_dump(exclude_unset=True, exclude_none=True))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, service: BookService = Depends(get_book_service)) -> None:
    service.delete(book_id)
    return None


@router.post("/{book_id}/lend", response_model=Book)
def lend_copy(book_id: int, service: BookService = Depends(get_book_service)) -> Book:
    """Lend one copy; ``available_copies`` drops by one."""
    return service.lend_copy(book_id)


@router.post("/{book_id}/return", response_model=Book)
def return_copy(book_id: int, service: BookService = Depends(get_book_service)) -> Book:
    """Take one copy back; ``available_copies`` grows by one."""
    return service.return_copy(book_id)


@router.post("/{book_id}/copies", response_model=Book)
def add_copies(book_id: int, body: CopiesAdded, service: BookService = Depends(get_book_service)) -> Book:
    return service.add_copies(book_id, body.count)
