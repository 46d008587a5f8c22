"""
Service layer.

Each service wraps one repository and encapsulates the business rules
of its domain.  Services are the only layer that raises
``CatalogError``; API handlers merely translate those errors into
HTTP responses.
"""

from .book_service import BookService
from .employee_service import EmployeeService
from .product_service import ProductService
from .user_service import UserService

__all__ = ["BookService", "EmployeeService", "ProductService", "UserService"]
