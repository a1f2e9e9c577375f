"""
Pet Store Backend: Customer SQLAlchemy Model
===============================================

What:  ORM model for the `customer` table.
Who:   Used by CustomerRepository and PetStoreService.

A customer may shop at any number of pet stores. Deleting a store removes
the `pet_store_customer` rows but keeps the customer.
"""

from typing import TYPE_CHECKING, Set

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pet_store.database import Base
from pet_store.models.pet_store import pet_store_customer

if TYPE_CHECKING:
    from pet_store.models.pet_store import PetStore


class Customer(Base):
    """Patron record, associated with zero or more pet stores."""

    __tablename__ = "customer"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_first_name: Mapped[str | None] = mapped_column(String(60))
    customer_last_name: Mapped[str | None] = mapped_column(String(60))
    customer_email: Mapped[str | None] = mapped_column(String(128))

    pet_stores: Mapped[Set["PetStore"]] = relationship(
        secondary=pet_store_customer,
        back_populates="customers",
    )

    def belongs_to(self, pet_store_id: int) -> bool:
        """True when this customer is a member of the given store."""
        return any(store.pet_store_id == pet_store_id for store in self.pet_stores)

    def __repr__(self) -> str:
        return f"<Customer(id={self.customer_id}, email='{self.customer_email}')>"
