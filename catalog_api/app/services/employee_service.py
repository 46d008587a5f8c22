"""
Business logic for employees.

On top of generic CRUD the ``EmployeeService`` exposes the HR verbs:
salary changes, department transfers, promotions and (de)activation.
Each verb changes exactly one field and leaves the rest of the record
untouched.  A salary change to a non‑positive amount is rejected with
``INVALID_ARGUMENT`` and the stored salary stays as it was.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from catalog_api.app.core.errors import CatalogError
from catalog_api.app.repositories.indexed import IndexedRepository
from catalog_api.app.schemas.employee import (
    Department,
    DepartmentStatistics,
    Employee,
    EmployeeStatistics,
    Position,
)

from .base import CrudService

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class EmployeeService(CrudService[Employee]):
    """Service for managing employees."""

    def __init__(self, repository: IndexedRepository[Employee]) -> None:
        super().__init__(repository)

    def update_salary(self, employee_id: int, new_salary: float) -> Employee:
        if new_salary <= 0:
            logger.warning("Rejected salary %s for employee %s", new_salary, employee_id)
            raise CatalogError.invalid(
                "Salary must be positive", entity=self.entity_name, entity_id=employee_id
            )
        employee = self._mutate(employee_id, lambda e: e.model_copy(update={"salary": new_salary}))
        logger.info("Salary of employee %s set to %.2f", employee_id, new_salary)
        return employee

    def transfer_department(self, employee_id: int, department: Department) -> Employee:
        department = self._coerce(Department, department, employee_id)
        employee = self._mutate(employee_id, lambda e: e.model_copy(update={"department": department}))
        logger.info("Employee %s transferred to %s", employee_id, department.value)
        return employee

    def promote(self, employee_id: int, position: Position) -> Employee:
        position = self._coerce(Position, position, employee_id)
        employee = self._mutate(employee_id, lambda e: e.model_copy(update={"position": position}))
        logger.info("Employee %s promoted to %s", employee_id, position.value)
        return employee

    def activate(self, employee_id: int) -> Employee:
        return self._set_active(employee_id, True)

    def deactivate(self, employee_id: int) -> Employee:
        return self._set_active(employee_id, False)

    def _set_active(self, employee_id: int, active: bool) -> Employee:
        employee = self._mutate(employee_id, lambda e: e.model_copy(update={"active": active}))
        logger.info("Employee %s %s", employee_id, "activated" if active else "deactivated")
        return employee

    def list_by_department(self, department: Department) -> List[Employee]:
        return self.repository.find_by_index(self._coerce(Department, department))

    def list_sorted_by_salary(self, descending: bool = False) -> List[Employee]:
        """All employees ranked by salary (ties keep insertion order)."""
        return sorted(self.repository.find_all(), reverse=descending)

    def statistics(self) -> EmployeeStatistics:
        """Head count and salary cost of active staff, per department.

        Departments without any employee are left out.
        """
        employees = self.repository.find_all()
        active = [e for e in employees if e.active]
        total_cost = sum(e.salary for e in active)

        per_department: Dict[Department, DepartmentStatistics] = {}
        for employee in employees:
            stats = per_department.setdefault(
                employee.department, DepartmentStatistics(department=employee.department)
            )
            stats.employees += 1
            if employee.active:
                stats.active_employees += 1
                stats.salary_cost += employee.salary

        return EmployeeStatistics(
            total_employees=len(employees),
            active_employees=len(active),
            total_salary_cost=total_cost,
            average_salary=total_cost / len(active) if active else 0.0,
            departments=[per_department[d] for d in Department if d in per_department],
        )

    def _coerce(self, enum_type: Type[E], value: Any, employee_id: Optional[int] = None) -> E:
        try:
            return enum_type(value)
        except ValueError as exc:
            raise CatalogError.invalid(
                f"Unknown {enum_type.__name__.lower()} {value!r}",
                entity=self.entity_name,
                entity_id=employee_id,
            ) from exc
