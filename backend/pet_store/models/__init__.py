# Models package init
"""
Importing this package registers every model with `Base.metadata`, which
relationship resolution, Alembic autogenerate, and `create_all` all rely on.
"""

from pet_store.models.pet_store import PetStore, pet_store_customer
from pet_store.models.employee import Employee
from pet_store.models.customer import Customer

__all__ = ["PetStore", "Employee", "Customer", "pet_store_customer"]
