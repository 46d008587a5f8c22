"""
Per‑application service container.

``build_container`` creates one repository per entity type and the
service that wraps it.  The container is stored on ``app.state`` by
``create_app``; nothing here is module level, so two applications (or
two tests) never share entities or id counters.
"""

from dataclasses import dataclass

from catalog_api.app.repositories import IndexedRepository, InMemoryRepository
from catalog_api.app.schemas.book import Book
from catalog_api.app.schemas.employee import Employee
from catalog_api.app.schemas.product import Product
from catalog_api.app.schemas.user import User
from catalog_api.app.services import BookService, EmployeeService, ProductService, UserService


@dataclass
class CatalogContainer:
    employees: EmployeeService
    books: BookService
    products: ProductService
    users: UserService


def build_container() -> CatalogContainer:
    return CatalogContainer(
        employees=EmployeeService(IndexedRepository(Employee, index_attribute="department")),
        books=BookService(IndexedRepository(Book, index_attribute="category")),
        products=ProductService(IndexedRepository(Product, index_attribute="category")),
        users=UserService(InMemoryRepository(User)),
    )
