"""
Demo records loaded when ``SEED_SAMPLE_DATA`` is enabled.

Records go through the services, not straight into the repositories,
so the seed obeys every validation and uniqueness rule.
"""

import logging
from datetime import date

from catalog_api.app.schemas.book import Book
from catalog_api.app.schemas.employee import Department, Employee, Position
from catalog_api.app.schemas.product import Product
from catalog_api.app.schemas.user import User

from .container import CatalogContainer

logger = logging.getLogger(__name__)


SAMPLE_USERS = [
    ("John Doe", "john.doe@email.com", 25),
    ("Jane Smith", "jane.smith@email.com", 30),
    ("Bob Johnson", "bob.johnson@email.com", 35),
    ("Alice Brown", "alice.brown@email.com", 28),
    ("Charlie Wilson", "charlie.wilson@email.com", 42),
]

SAMPLE_EMPLOYEES = [
    ("John", "Smith", Department.INFORMATION_TECHNOLOGY, Position.SENIOR, 75000.0, date(2020, 1, 15)),
    ("Sarah", "Johnson", Department.HUMAN_RESOURCES, Position.MANAGER, 85000.0, date(2019, 3, 10)),
    ("Michael", "Brown", Department.FINANCE, Position.JUNIOR, 55000.0, date(2022, 6, 1)),
    ("Emily", "Davis", Department.MARKETING, Position.LEAD, 70000.0, date(2021, 9, 20)),
]

SAMPLE_BOOKS = [
    ("The Great Gatsby", "F. Scott Fitzgerald", "978-0743273565", "Fiction", 3),
    ("To Kill a Mockingbird", "Harper Lee", "978-0061120084", "Fiction", 2),
    ("A Brief History of Time", "Stephen Hawking", "978-0553380163", "Science", 1),
    ("Clean Code", "Robert C. Martin", "978-0132350884", "Technology", 4),
]

SAMPLE_PRODUCTS = [
    ("Laptop", "Portable computer", 999.99, "Electronics"),
    ("Headphones", "Noise cancelling", 199.5, "Electronics"),
    ("Desk", "Standing desk", 349.0, "Furniture"),
]


def seed_sample_data(container: CatalogContainer) -> None:
    for name, email, age in SAMPLE_USERS:
        container.users.create(User(name=name, email=email, age=age))
    for first, last, department, position, salary, hired in SAMPLE_EMPLOYEES:
        container.employees.create(
            Employee(
                first_name=first,
                last_name=last,
                email=f"{first.lower()}.{last.lower()}@company.com",
                department=department,
                position=position,
                salary=salary,
                hire_date=hired,
            )
        )
    for title, author, isbn, category, copies in SAMPLE_BOOKS:
        container.books.create(
            Book(
                title=title,
                author=author,
                isbn=isbn,
                category=category,
                total_copies=copies,
                available_copies=copies,
            )
        )
    for name, description, price, category in SAMPLE_PRODUCTS:
        container.products.create(Product(name=name, description=description, price=price, category=category))
    logger.info(
        "Seeded %s users, %s employees, %s books, %s products",
        len(SAMPLE_USERS),
        len(SAMPLE_EMPLOYEES),
        len(SAMPLE_BOOKS),
        len(SAMPLE_PRODUCTS),
    )
