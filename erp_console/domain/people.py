"""
People Domain Models

Employees, attendance and project delivery.
"""
from typing import Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel


class Employee(WireModel):
    id: str
    employee_number: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    status: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class EmployeeCreate(BaseModel):
    employee_number: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    hire_date: str = Field(..., min_length=1, description="YYYY-MM-DD")


class AttendanceRecord(WireModel):
    id: Optional[str] = None
    employee_id: str
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    status: Optional[str] = None


class Project(WireModel):
    id: str
    project_number: Optional[str] = None
    name: str
    status: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    budget: Optional[float] = None
    percent_complete: Optional[float] = None


class ProjectTask(WireModel):
    id: str
    project_id: str
    name: str
    status: Optional[str] = None
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None


class ProjectMilestone(WireModel):
    id: str
    project_id: str
    name: str
    due_date: Optional[str] = None
    status: Optional[str] = None


class Timesheet(WireModel):
    id: str
    employee_id: str
    project_id: Optional[str] = None
    date: Optional[str] = None
    hours: float = 0
    status: Optional[str] = None
