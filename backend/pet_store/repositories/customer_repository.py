"""
Pet Store Backend: Customer Repository
=========================================

What:  Persistence accessors for Customer entities.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pet_store.models import Customer


class CustomerRepository:
    """find / save for the `customer` table."""

    async def find_by_id(self, db: AsyncSession, customer_id: int) -> Optional[Customer]:
        # Memberships are needed for the store check and the set update
        result = await db.execute(
            select(Customer)
            .options(selectinload(Customer.pet_stores))
            .where(Customer.customer_id == customer_id)
        )
        return result.scalar_one_or_none()

    async def save(self, db: AsyncSession, customer: Customer) -> Customer:
        db.add(customer)
        await db.flush()
        return customer


customer_repository = CustomerRepository()
