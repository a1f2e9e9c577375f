"""
Pet Store Backend: PetStore SQLAlchemy Model
===============================================

What:  ORM model for the `pet_store` table and the `pet_store_customer` join table.
Who:   Used by PetStoreRepository and PetStoreService, and by Alembic.

Relationships:
    pet_store 1 ──< employee          (cascade delete, orphan removal)
    pet_store >──< customer           (via pet_store_customer; delete removes
                                       join rows only)
"""

from typing import TYPE_CHECKING, Set

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pet_store.database import Base

if TYPE_CHECKING:
    from pet_store.models.customer import Customer
    from pet_store.models.employee import Employee


# ── Join Table ────────────────────────────────────────────────────────────
# Composite primary key: a customer is a member of a given store at most once
pet_store_customer = Table(
    "pet_store_customer",
    Base.metadata,
    Column(
        "pet_store_id",
        Integer,
        ForeignKey("pet_store.pet_store_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "customer_id",
        Integer,
        ForeignKey("customer.customer_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class PetStore(Base):
    """
    A pet store: the aggregate root owning employees and serving customers.

    Lifecycle:
        1. Created by POST /pet_store (pet_store_id generated on flush)
        2. Scalar fields overwritten by PUT /pet_store/{id}
        3. Deleted by DELETE /pet_store/{id}; employees go with it,
           customers only lose the membership
    """

    __tablename__ = "pet_store"

    pet_store_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pet_store_name: Mapped[str | None] = mapped_column(String(60))
    pet_store_address: Mapped[str | None] = mapped_column(String(128))
    pet_store_city: Mapped[str | None] = mapped_column(String(60))
    pet_store_state: Mapped[str | None] = mapped_column(String(60))
    pet_store_zip: Mapped[str | None] = mapped_column(String(20))
    pet_store_phone: Mapped[str | None] = mapped_column(String(30))

    employees: Mapped[Set["Employee"]] = relationship(
        back_populates="pet_store",
        cascade="all, delete-orphan",
    )
    customers: Mapped[Set["Customer"]] = relationship(
        secondary=pet_store_customer,
        back_populates="pet_stores",
    )

    def __repr__(self) -> str:
        return f"<PetStore(id={self.pet_store_id}, name='{self.pet_store_name}')>"
