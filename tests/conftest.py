# tests/conftest.py
"""
Pytest configuration and shared fixtures.

Every fixture builds fresh repositories, so tests never share entities
or id counters.

Fixtures provided:
- settings: Settings with sample data disabled
- app / client: a FastAPI application and its TestClient
- employee_service, book_service, product_service, user_service
- make_employee, make_book, make_product, make_user: entity factories
"""

import logging
from datetime import date

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app
from catalog_api.app.repositories import IndexedRepository, InMemoryRepository
from catalog_api.app.schemas.book import Book
from catalog_api.app.schemas.employee import Department, Employee, Position
from catalog_api.app.schemas.product import Product
from catalog_api.app.schemas.user import User
from catalog_api.app.services import BookService, EmployeeService, ProductService, UserService

# Reduce noise from external libraries during testing
logging.getLogger("httpx").setLevel(logging.WARNING)


# ==================== APPLICATION FIXTURES ====================

@pytest.fixture
def settings():
    return Settings(log_level="DEBUG", log_file=None, seed_sample_data=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


# ==================== SERVICE FIXTURES ====================

@pytest.fixture
def employee_service():
    return EmployeeService(IndexedRepository(Employee, index_attribute="department"))


@pytest.fixture
def book_service():
    return BookService(IndexedRepository(Book, index_attribute="category"))


@pytest.fixture
def product_service():
    return ProductService(IndexedRepository(Product, index_attribute="category"))


@pytest.fixture
def user_service():
    return UserService(InMemoryRepository(User))


# ==================== ENTITY FACTORIES ====================

@pytest.fixture
def make_employee():
    def factory(salary=50000.0, department=Department.FINANCE, **overrides):
        data = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "department": department,
            "position": Position.JUNIOR,
            "salary": salary,
            "hire_date": date(2024, 1, 15),
        }
        data.update(overrides)
        return Employee(**data)

    return factory


@pytest.fixture
def make_book():
    def factory(copies=3, category="Fiction", **overrides):
        data = {
            "title": "Dune",
            "author": "Frank Herbert",
            "category": category,
            "total_copies": copies,
            "available_copies": copies,
        }
        data.update(overrides)
        return Book(**data)

    return factory


@pytest.fixture
def make_product():
    def factory(name="Laptop", category="Electronics", price=999.0, **overrides):
        return Product(name=name, category=category, price=price, **overrides)

    return factory


@pytest.fixture
def make_user():
    def factory(name="John Doe", email="john.doe@email.com", age=25, **overrides):
        return User(name=name, email=email, age=age, **overrides)

    return factory
