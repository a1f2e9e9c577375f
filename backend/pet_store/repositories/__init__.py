"""
Repository layer: one explicit persistence accessor per entity type.

    PetStoreRepository  → find_by_id, find_all, save, delete
    EmployeeRepository  → find_by_id, save
    CustomerRepository  → find_by_id, save
"""

from pet_store.repositories.pet_store_repository import PetStoreRepository, pet_store_repository
from pet_store.repositories.employee_repository import EmployeeRepository, employee_repository
from pet_store.repositories.customer_repository import CustomerRepository, customer_repository

__all__ = [
    "PetStoreRepository",
    "EmployeeRepository",
    "CustomerRepository",
    "pet_store_repository",
    "employee_repository",
    "customer_repository",
]
