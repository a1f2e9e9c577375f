"""
Pet Store Backend: Employee Repository
=========================================

What:  Persistence accessors for Employee entities.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pet_store.models import Employee


class EmployeeRepository:
    """find / save for the `employee` table."""

    async def find_by_id(self, db: AsyncSession, employee_id: int) -> Optional[Employee]:
        # The owning store is loaded so reassigning `pet_store` never needs IO
        result = await db.execute(
            select(Employee)
            .options(selectinload(Employee.pet_store))
            .where(Employee.employee_id == employee_id)
        )
        return result.scalar_one_or_none()

    async def save(self, db: AsyncSession, employee: Employee) -> Employee:
        db.add(employee)
        await db.flush()
        return employee


employee_repository = EmployeeRepository()
