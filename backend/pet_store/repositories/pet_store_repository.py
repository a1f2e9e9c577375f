"""
Pet Store Backend: PetStore Repository
=========================================

What:  Persistence accessors for PetStore entities.
How:   Thin wrappers over AsyncSession. Methods flush but never commit;
       the request's session dependency owns the transaction.

Loading:
    find_by_id eager-loads `employees` and `customers` with selectinload,
    because the full store representation and the delete cascade both need
    them and async sessions cannot lazy-load on attribute access.
    find_all loads scalar columns only (summary view).
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pet_store.models import PetStore


class PetStoreRepository:
    """find / save / delete for the `pet_store` table."""

    async def find_by_id(self, db: AsyncSession, pet_store_id: int) -> Optional[PetStore]:
        result = await db.execute(
            select(PetStore)
            .options(
                selectinload(PetStore.employees),
                selectinload(PetStore.customers),
            )
            .where(PetStore.pet_store_id == pet_store_id)
        )
        return result.scalar_one_or_none()

    async def find_all(self, db: AsyncSession) -> List[PetStore]:
        result = await db.execute(select(PetStore).order_by(PetStore.pet_store_id))
        return list(result.scalars().all())

    async def save(self, db: AsyncSession, pet_store: PetStore) -> PetStore:
        db.add(pet_store)
        await db.flush()  # Assigns pet_store_id on insert
        return pet_store

    async def delete(self, db: AsyncSession, pet_store: PetStore) -> None:
        await db.delete(pet_store)
        await db.flush()


pet_store_repository = PetStoreRepository()
