"""
People Repositories - HR and projects
"""
from typing import Any, Dict, List

from erp_console.domain import AttendanceRecord, Employee, Page, ProjectMilestone, ProjectTask
from erp_console.repositories.module import ModuleRepository


class HrRepository(ModuleRepository):
    module = "hr"

    async def get_employees(self, page: int = 1, per_page: int = 20) -> Page[Employee]:
        return await self.resource("employees").list(page=page, per_page=per_page)

    async def create_employee(self, data: Dict[str, Any]) -> Employee:
        return await self.resource("employees").create(data)

    async def check_in(self, employee_id: str) -> Any:
        return await self._attendance("check-in", employee_id)

    async def check_out(self, employee_id: str) -> Any:
        return await self._attendance("check-out", employee_id)

    async def _attendance(self, action: str, employee_id: str) -> Any:
        data = await self.connector.post(self.path(f"/attendance/{action}"),
                                         json={'employee_id': employee_id})
        if isinstance(data, dict) and 'employee_id' in data:
            return AttendanceRecord.model_validate(data)
        return data


class ProjectsRepository(ModuleRepository):
    module = "projects"

    async def get_projects(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("projects").list(page=page, per_page=per_page)

    async def create_project(self, data: Dict[str, Any]) -> Any:
        return await self.resource("projects").create(data)

    async def update_status(self, project_id: str, status: str) -> Any:
        return await self.resource("projects").perform(project_id, "status", {'status': status})

    async def get_tasks(self, project_id: str) -> List[ProjectTask]:
        return await self.resource("tasks").list(project_id=project_id)

    async def create_task(self, project_id: str, data: Dict[str, Any]) -> Any:
        return await self.resource("tasks").create(data, project_id=project_id)

    async def complete_task(self, task_id: str) -> Any:
        return await self.resource("tasks").perform(task_id, "complete")

    async def get_milestones(self, project_id: str) -> List[ProjectMilestone]:
        return await self.resource("milestones").list(project_id=project_id)

    async def create_milestone(self, project_id: str, data: Dict[str, Any]) -> Any:
        return await self.resource("milestones").create(data, project_id=project_id)

    async def complete_milestone(self, milestone_id: str) -> Any:
        return await self.resource("milestones").perform(milestone_id, "complete")

    async def get_timesheets(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("timesheets").list(page=page, per_page=per_page)

    async def approve_timesheet(self, timesheet_id: str) -> Any:
        return await self.resource("timesheets").perform(timesheet_id, "approve")
