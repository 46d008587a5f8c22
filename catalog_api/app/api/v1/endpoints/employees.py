"""
Employee endpoints for API v1.

Besides CRUD these routes expose the HR verbs of ``EmployeeService``:
salary changes, department transfers, promotions and
(de)activation.  Each route forwards to exactly one service call;
business rules and not‑found handling live in the service and surface
here as ``CatalogError`` responses.
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status

from catalog_api.app.api.dependencies import get_employee_service
from catalog_api.app.schemas.employee import (
    Department,
    DepartmentTransfer,
    Employee,
    EmployeeCreate,
    EmployeeStatistics,
    EmployeeUpdate,
    Promotion,
    SalaryUpdate,
)
from catalog_api.app.services.employee_service import EmployeeService

router = APIRouter()


@router.get("/", response_model=List[Employee])
def list_employees(
    sort: Optional[Literal["salary"]] = Query(None, description="Pass 'salary' to rank by pay"),
    descending: bool = Query(False, description="Highest salary first when sorting"),
    service: EmployeeService = Depends(get_employee_service),
) -> List[Employee]:
    """Return all employees.

    Without ``sort`` the list is in insertion order.  With
    ``sort=salary`` it is ordered by salary, ascending unless
    ``descending`` is set; equal salaries keep insertion order.
    """
    if sort == "salary":
        return service.list_sorted_by_salary(descending=descending)
    return service.list_all()


@router.get("/statistics", response_model=EmployeeStatistics)
def employee_statistics(service: EmployeeService = Depends(get_employee_service)) -> EmployeeStatistics:
    """Head count and salary cost, company wide and per department."""
    return service.statistics()


@router.get("/department/{department}", response_model=List[Employee])
def list_employees_by_department(
    department: Department,
    service: EmployeeService = Depends(get_employee_service),
) -> List[Employee]:
    """Return the employees currently assigned to ``department``."""
    return service.list_by_department(department)


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)) -> Employee:
    """Retrieve a single employee by ID."""
    return service.get_by_id(employee_id)


@router.post("/", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    return service.create(Employee(**employee_in.model_dump()))


@router.put("/{employee_id}", response_model=Employee)
def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Update an employee.  Only the provided fields are changed."""
    return service.update(employee_id, employee_in.model_dump(exclude_unset=True, exclude_none=True))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)) -> None:
    """Delete an employee.  Deleting an unknown ID also returns 204."""
    service.delete(employee_id)
    return None


@router.post("/{employee_id}/salary", response_model=Employee)
def update_salary(
    employee_id: int,
    body: SalaryUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Set a new salary.  Non‑positive amounts are rejected with 400."""
    return service.update_salary(employee_id, body.salary)


@router.post("/{employee_id}/transfer", response_model=Employee)
def transfer_department(
    employee_id: int,
    body: DepartmentTransfer,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    return service.transfer_department(employee_id, body.department)


@router.post("/{employee_id}/promote", response_model=Employee)
def promote(
    employee_id: int,
    body: Promotion,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    return service.promote(employee_id, body.position)


@router.post("/{employee_id}/activate", response_model=Employee)
def activate(employee_id: int, service: EmployeeService = Depends(get_employee_service)) -> Employee:
    return service.activate(employee_id)


@router.post("/{employee_id}/deactivate", response_model=Employee)
def deactivate(employee_id: int, service: EmployeeService = Depends(get_employee_service)) -> Employee:
    """Mark an employee inactive.  The record stays stored."""
    return service.deactivate(employee_id)
