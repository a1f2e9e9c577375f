"""
Pet Store Backend: Pet Store Service (Business Logic)
========================================================

What:  Upserts, lookups, and deletes for pet stores and the employee/customer
       associations hanging off them.
How:   Each public method fetches what it needs through the repositories,
       copies scalar fields from the request record onto the entity, saves,
       and shapes the result into a response record.
Who:   Called by the /pet_store route handlers.

Upsert Rules:
    id absent   → build a new entity; the database generates its id on flush
    id present  → fetch the entity or raise NotFoundError, then overwrite
                  its scalar fields

Association Rules:
    Employee: its current store must be the store in the request path.
    Customer: its store set must contain the store in the request path.
    A mismatch raises ValidationError; an entity is never silently moved
    from one store to another.

Error Handling Strategy:
    NotFoundError and ValidationError propagate unchanged. SQLAlchemy errors
    are logged with their stack trace and re-raised as DatabaseError, which
    hides query details from the client.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.exceptions import DatabaseError, NotFoundError, ValidationError
from pet_store.models import Customer, Employee, PetStore
from pet_store.repositories import (
    customer_repository,
    employee_repository,
    pet_store_repository,
)
from pet_store.schemas.pet_store import (
    PetStoreCustomer,
    PetStoreData,
    PetStoreEmployee,
)

logger = logging.getLogger(__name__)


class PetStoreService:
    """
    Business logic layer for pet stores, employees and customers.

    Stateless: every method receives the request's session, so one instance
    is shared by all requests.
    """

    # ══════════════════════════════════════════════════════════════════════
    # Stores
    # ══════════════════════════════════════════════════════════════════════

    async def save_pet_store(self, db: AsyncSession, pet_store_data: PetStoreData) -> PetStoreData:
        """
        Create or update a pet store.

        Nested `employees` / `customers` in the request are ignored; only the
        scalar fields are copied.

        Returns:
            PetStoreData with the store's current employees and customers

        Raises:
            NotFoundError: pet_store_id given but no such store (→ 404)
            DatabaseError: insert/update failed (→ 500)
        """
        try:
            pet_store = await self._find_or_create_pet_store(db, pet_store_data.pet_store_id)
            self._copy_pet_store_fields(pet_store, pet_store_data)
            saved = await pet_store_repository.save(db, pet_store)
            logger.info("Saved pet store %s", saved.pet_store_id)
            return PetStoreData.from_entity(saved)

        except SQLAlchemyError as e:
            logger.error("Database error saving pet store: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the pet store. Please try again.",
                context={"pet_store_id": pet_store_data.pet_store_id},
            )

    async def retrieve_all_pet_stores(self, db: AsyncSession) -> List[PetStoreData]:
        """
        List every store in summary form.

        Employees and customers are never included, however many a store has.
        """
        try:
            pet_stores = await pet_store_repository.find_all(db)
        except SQLAlchemyError as e:
            logger.error("Database error listing pet stores: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve pet stores. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [
            PetStoreData.from_entity(pet_store, include_associations=False)
            for pet_store in pet_stores
        ]

    async def retrieve_pet_store_by_id(self, db: AsyncSession, pet_store_id: int) -> PetStoreData:
        """
        Full representation of one store.

        Raises:
            NotFoundError: no store with this id (→ 404)
        """
        try:
            pet_store = await self._find_pet_store_by_id(db, pet_store_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching pet store %s: %s", pet_store_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the pet store. Please try again.",
                context={"pet_store_id": pet_store_id},
            )
        return PetStoreData.from_entity(pet_store)

    async def delete_pet_store_by_id(self, db: AsyncSession, pet_store_id: int) -> None:
        """
        Delete a store.

        Its employees are deleted with it. Its customers are kept and only
        lose their membership in this store.

        Raises:
            NotFoundError: no store with this id (→ 404)
        """
        try:
            pet_store = await self._find_pet_store_by_id(db, pet_store_id)
            await pet_store_repository.delete(db, pet_store)
            logger.info(
                "Deleted pet store %s (%d employees removed, %d customers detached)",
                pet_store_id,
                len(pet_store.employees),
                len(pet_store.customers),
            )

        except SQLAlchemyError as e:
            logger.error("Database error deleting pet store %s: %s", pet_store_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the pet store. Please try again.",
                context={"pet_store_id": pet_store_id},
            )

    # ══════════════════════════════════════════════════════════════════════
    # Employees
    # ══════════════════════════════════════════════════════════════════════

    async def save_employee(
        self,
        db: AsyncSession,
        pet_store_id: int,
        pet_store_employee: PetStoreEmployee,
    ) -> PetStoreEmployee:
        """
        Create an employee in a store, or update one already working there.

        Raises:
            NotFoundError: unknown store or employee id (→ 404)
            ValidationError: the employee belongs to another store (→ 400)
        """
        try:
            pet_store = await self._find_pet_store_by_id(db, pet_store_id)
            employee = await self._find_or_create_employee(
                db, pet_store_id, pet_store_employee.employee_id
            )

            self._copy_employee_fields(employee, pet_store_employee)
            employee.pet_store = pet_store
            pet_store.employees.add(employee)

            saved = await employee_repository.save(db, employee)
            logger.info("Saved employee %s in pet store %s", saved.employee_id, pet_store_id)
            return PetStoreEmployee.from_entity(saved)

        except SQLAlchemyError as e:
            logger.error("Database error saving employee: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the employee. Please try again.",
                context={"pet_store_id": pet_store_id, "employee_id": pet_store_employee.employee_id},
            )

    # ══════════════════════════════════════════════════════════════════════
    # Customers
    # ══════════════════════════════════════════════════════════════════════

    async def save_customer(
        self,
        db: AsyncSession,
        pet_store_id: int,
        pet_store_customer: PetStoreCustomer,
    ) -> PetStoreCustomer:
        """
        Create a customer of a store, or update one already shopping there.

        Adding a customer to a store it already belongs to leaves a single
        membership: both sides are sets and the join table key is
        (pet_store_id, customer_id).

        Raises:
            NotFoundError: unknown store or customer id (→ 404)
            ValidationError: the customer is not a member of this store (→ 400)
        """
        try:
            pet_store = await self._find_pet_store_by_id(db, pet_store_id)
            customer = await self._find_or_create_customer(
                db, pet_store_id, pet_store_customer.customer_id
            )

            self._copy_customer_fields(customer, pet_store_customer)
            customer.pet_stores.add(pet_store)
            pet_store.customers.add(customer)

            saved = await customer_repository.save(db, customer)
            logger.info("Saved customer %s in pet store %s", saved.customer_id, pet_store_id)
            return PetStoreCustomer.from_entity(saved)

        except SQLAlchemyError as e:
            logger.error("Database error saving customer: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the customer. Please try again.",
                context={"pet_store_id": pet_store_id, "customer_id": pet_store_customer.customer_id},
            )

    # ══════════════════════════════════════════════════════════════════════
    # Lookup helpers
    # ══════════════════════════════════════════════════════════════════════

    async def _find_pet_store_by_id(self, db: AsyncSession, pet_store_id: int) -> PetStore:
        pet_store = await pet_store_repository.find_by_id(db, pet_store_id)
        if pet_store is None:
            raise NotFoundError(resource="Pet store", resource_id=pet_store_id)
        return pet_store

    async def _find_or_create_pet_store(self, db: AsyncSession, pet_store_id: int | None) -> PetStore:
        if pet_store_id is None:
            # Collections start out loaded (empty) so the new store can be
            # shaped after flush without a lazy load
            return PetStore(employees=set(), customers=set())
        return await self._find_pet_store_by_id(db, pet_store_id)

    async def _find_or_create_employee(
        self, db: AsyncSession, pet_store_id: int, employee_id: int | None
    ) -> Employee:
        if employee_id is None:
            return Employee()

        employee = await employee_repository.find_by_id(db, employee_id)
        if employee is None:
            raise NotFoundError(resource="Employee", resource_id=employee_id)

        if employee.pet_store_id != pet_store_id:
            raise ValidationError(
                message=(
                    f"Employee with ID={employee_id} does not belong to "
                    f"pet store with ID={pet_store_id}"
                ),
                context={"employee_id": employee_id, "pet_store_id": pet_store_id},
            )
        return employee

    async def _find_or_create_customer(
        self, db: AsyncSession, pet_store_id: int, customer_id: int | None
    ) -> Customer:
        if customer_id is None:
            return Customer(pet_stores=set())

        customer = await customer_repository.find_by_id(db, customer_id)
        if customer is None:
            raise NotFoundError(resource="Customer", resource_id=customer_id)

        if not customer.belongs_to(pet_store_id):
            raise ValidationError(
                message=(
                    f"Customer with ID={customer_id} does not belong to "
                    f"pet store with ID={pet_store_id}"
                ),
                context={"customer_id": customer_id, "pet_store_id": pet_store_id},
            )
        return customer

    # ══════════════════════════════════════════════════════════════════════
    # Field copies (scalar fields only; ids and relationships are never copied)
    # ══════════════════════════════════════════════════════════════════════

    @staticmethod
    def _copy_pet_store_fields(pet_store: PetStore, data: PetStoreData) -> None:
        pet_store.pet_store_name = data.pet_store_name
        pet_store.pet_store_address = data.pet_store_address
        pet_store.pet_store_city = data.pet_store_city
        pet_store.pet_store_state = data.pet_store_state
        pet_store.pet_store_zip = data.pet_store_zip
        pet_store.pet_store_phone = data.pet_store_phone

    @staticmethod
    def _copy_employee_fields(employee: Employee, data: PetStoreEmployee) -> None:
        employee.employee_first_name = data.employee_first_name
        employee.employee_last_name = data.employee_last_name
        employee.employee_phone = data.employee_phone
        employee.employee_job_title = data.employee_job_title

    @staticmethod
    def _copy_customer_fields(customer: Customer, data: PetStoreCustomer) -> None:
        customer.customer_first_name = data.customer_first_name
        customer.customer_last_name = data.customer_last_name
        customer.customer_email = data.customer_email


# ── Singleton Instance ────────────────────────────────────────────────────
pet_store_service = PetStoreService()
