"""
Pydantic models for employee data.

``Employee`` is the stored entity.  ``EmployeeCreate`` and
``EmployeeUpdate`` are the request bodies accepted by the API; they
only check the shape of the payload.  Domain rules such as a positive
salary are enforced by ``Employee.ensure_valid`` inside the service.

Employees are ordered by salary.  Equality stays identity based, so
``sorted(employees)`` ranks by pay while ``a == b`` still asks whether
both records are the same employee.
"""

from datetime import date
from enum import Enum
from typing import Any, ClassVar, List, Optional

from pydantic import BaseModel, Field

from .base import Entity


class Department(str, Enum):
    HUMAN_RESOURCES = "HUMAN_RESOURCES"
    FINANCE = "FINANCE"
    MARKETING = "MARKETING"
    SALES = "SALES"
    INFORMATION_TECHNOLOGY = "INFORMATION_TECHNOLOGY"
    OPERATIONS = "OPERATIONS"
    CUSTOMER_SERVICE = "CUSTOMER_SERVICE"


class Position(str, Enum):
    INTERN = "INTERN"
    JUNIOR = "JUNIOR"
    SENIOR = "SENIOR"
    LEAD = "LEAD"
    MANAGER = "MANAGER"
    DIRECTOR = "DIRECTOR"
    VP = "VP"
    CEO = "CEO"


class Employee(Entity):
    """An employee with personal and employment details."""

    entity_name: ClassVar[str] = "Employee"

    first_name: str = Field(..., examples=["Ada"])
    last_name: str = Field(..., examples=["Lovelace"])
    email: Optional[str] = Field(None, examples=["ada@example.com"])
    phone_number: Optional[str] = Field(None, examples=["555-0100"])
    department: Department = Field(..., examples=[Department.INFORMATION_TECHNOLOGY])
    position: Position = Field(..., examples=[Position.SENIOR])
    salary: float = Field(..., examples=[72000.0])
    hire_date: Optional[date] = Field(None, examples=["2024-01-15"])
    # Inactive employees remain stored; deactivation is not deletion.
    active: bool = Field(True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def ensure_valid(self) -> None:
        self._require_text("first_name")
        self._require_text("last_name")
        if self.salary is None or self.salary <= 0:
            raise self._invalid("Salary must be positive")

    # Total order on salary.  __eq__ is inherited and compares ids.
    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.salary < other.salary

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.salary <= other.salary

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.salary > other.salary

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.salary >= other.salary


class EmployeeCreate(BaseModel):
    """Schema for creating an employee."""

    first_name: str
    last_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    department: Department
    position: Position
    salary: float
    hire_date: Optional[date] = None
    active: bool = True


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee.

    All fields are optional; only provided fields will be updated.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    department: Department | None = None
    position: Position | None = None
    salary: float | None = None
    hire_date: date | None = None
    active: bool | None = None


class SalaryUpdate(BaseModel):
    salary: float = Field(..., examples=[80000.0])


class DepartmentTransfer(BaseModel):
    department: Department


class Promotion(BaseModel):
    position: Position


class DepartmentStatistics(BaseModel):
    department: Department
    employees: int = 0
    active_employees: int = 0
    # Salaries of active employees only.
    salary_cost: float = 0.0


class EmployeeStatistics(BaseModel):
    """Head count and salary cost, company wide and per department.

    Salary figures only include active employees; inactive ones are
    still counted in ``total_employees``.
    """

    total_employees: int = 0
    active_employees: int = 0
    total_salary_cost: float = 0.0
    average_salary: float = 0.0
    departments: List[DepartmentStatistics] = Field(default_factory=list)
