"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (employees, books, products,
users) under a unified prefix.  When a new entity type is introduced,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import books, employees, products, users

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(users.router, prefix="/users", tags=["users"])
