"""
FastAPI dependencies that hand a route the service it needs.

Services are held by the ``CatalogContainer`` stored on
``app.state.catalog`` when the application is built.  Routes receive
them through ``Depends`` and never import a module level instance.
"""

from fastapi import Request

from catalog_api.app.core.container import CatalogContainer
from catalog_api.app.services import BookService, EmployeeService, ProductService, UserService


def get_container(request: Request) -> CatalogContainer:
    return request.app.state.catalog


def get_employee_service(request: Request) -> EmployeeService:
    return get_container(request).employees


def get_book_service(request: Request) -> BookService:
    return get_container(request).books


def get_product_service(request: Request) -> ProductService:
    return get_container(request).products


def get_user_service(request: Request) -> UserService:
    return get_container(request).users
