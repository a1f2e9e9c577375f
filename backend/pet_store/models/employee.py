"""
Pet Store Backend: Employee SQLAlchemy Model
===============================================

What:  ORM model for the `employee` table.
Who:   Used by EmployeeRepository and PetStoreService.

An employee belongs to exactly one pet store. The foreign key is nullable at
the schema level, but every employee saved through the API has one, and it
never changes once set.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pet_store.database import Base

if TYPE_CHECKING:
    from pet_store.models.pet_store import PetStore


class Employee(Base):
    """Staff record, exclusively owned by one pet store."""

    __tablename__ = "employee"

    employee_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_first_name: Mapped[str | None] = mapped_column(String(60))
    employee_last_name: Mapped[str | None] = mapped_column(String(60))
    employee_phone: Mapped[str | None] = mapped_column(String(30))
    employee_job_title: Mapped[str | None] = mapped_column(String(60))

    pet_store_id: Mapped[int | None] = mapped_column(
        ForeignKey("pet_store.pet_store_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    pet_store: Mapped[Optional["PetStore"]] = relationship(back_populates="employees")

    def __repr__(self) -> str:
        return (
            f"<Employee(id={self.employee_id}, pet_store_id={self.pet_store_id}, "
            f"title='{self.employee_job_title}')>"
        )
