"""
Pet Store Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract, plus the shaping logic that
       turns persisted entities into response records.
How:   FastAPI validates request bodies against these models and serializes
       responses from them. The same model is used for a resource's request
       body and its response; fields the server controls are ignored on input.
Who:   Used by PetStoreService (shaping) and route handlers (contracts).

Shaping Rules:
    - Entities reference each other in both directions (store ↔ employee,
      store ↔ customer). Response records never do: a store lists summaries
      of its employees and customers, and those summaries carry no store.
    - Nested lists are ordered by id so responses are stable.
    - The list endpoint uses the summary shape: nested lists are empty and
      the entity collections are not read at all.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from pet_store.models import Customer, Employee, PetStore


# ══════════════════════════════════════════════════════════════════════════
# Nested Records
# ══════════════════════════════════════════════════════════════════════════


class PetStoreEmployee(BaseModel):
    """
    What:  Employee record without its store back-reference.
    Who:   Request body and response of POST /pet_store/{id}/employee;
           nested inside PetStoreData.

    employee_id absent → a new employee is created.
    employee_id present → that employee is updated (must belong to the store).
    """
    employee_id: Optional[int] = Field(default=None, description="Employee identifier")
    employee_first_name: Optional[str] = Field(default=None, max_length=60)
    employee_last_name: Optional[str] = Field(default=None, max_length=60)
    employee_phone: Optional[str] = Field(default=None, max_length=30)
    employee_job_title: Optional[str] = Field(default=None, max_length=60)

    model_config = {"from_attributes": True}

    @classmethod
    def from_entity(cls, employee: Employee) -> "PetStoreEmployee":
        return cls.model_validate(employee)


class PetStoreCustomer(BaseModel):
    """
    What:  Customer record without its store memberships.
    Who:   Request body and response of POST /pet_store/{id}/customer;
           nested inside PetStoreData.
    """
    customer_id: Optional[int] = Field(default=None, description="Customer identifier")
    customer_first_name: Optional[str] = Field(default=None, max_length=60)
    customer_last_name: Optional[str] = Field(default=None, max_length=60)
    customer_email: Optional[str] = Field(default=None, max_length=128)

    model_config = {"from_attributes": True}

    @classmethod
    def from_entity(cls, customer: Customer) -> "PetStoreCustomer":
        return cls.model_validate(customer)


# ══════════════════════════════════════════════════════════════════════════
# Store Record
# ══════════════════════════════════════════════════════════════════════════


class PetStoreData(BaseModel):
    """
    What:  Full representation of a pet store.
    Who:   Request body of POST/PUT /pet_store; response of every store endpoint
           except DELETE.

    `customers` and `employees` are output-only. Values sent in a request
    body are accepted by the schema and ignored by the service.
    """
    pet_store_id: Optional[int] = Field(default=None, description="Pet store identifier")
    pet_store_name: Optional[str] = Field(default=None, max_length=60)
    pet_store_address: Optional[str] = Field(default=None, max_length=128)
    pet_store_city: Optional[str] = Field(default=None, max_length=60)
    pet_store_state: Optional[str] = Field(default=None, max_length=60)
    pet_store_zip: Optional[str] = Field(default=None, max_length=20)
    pet_store_phone: Optional[str] = Field(default=None, max_length=30)
    customers: List[PetStoreCustomer] = Field(default_factory=list)
    employees: List[PetStoreEmployee] = Field(default_factory=list)

    @classmethod
    def from_entity(
        cls,
        pet_store: PetStore,
        include_associations: bool = True,
    ) -> "PetStoreData":
        """
        Shape a PetStore entity into a response record.

        Args:
            pet_store: The entity. When include_associations is True its
                       `employees` and `customers` collections must already be
                       loaded (the repository eager-loads them).
            include_associations: False produces the summary shape used by
                       the list endpoint; the collections are left untouched.
        """
        data = cls(
            pet_store_id=pet_store.pet_store_id,
            pet_store_name=pet_store.pet_store_name,
            pet_store_address=pet_store.pet_store_address,
            pet_store_city=pet_store.pet_store_city,
            pet_store_state=pet_store.pet_store_state,
            pet_store_zip=pet_store.pet_store_zip,
            pet_store_phone=pet_store.pet_store_phone,
        )
        if include_associations:
            data.customers = [
                PetStoreCustomer.from_entity(customer)
                for customer in sorted(pet_store.customers, key=lambda c: c.customer_id)
            ]
            data.employees = [
                PetStoreEmployee.from_entity(employee)
                for employee in sorted(pet_store.employees, key=lambda e: e.employee_id)
            ]
        return data


# ══════════════════════════════════════════════════════════════════════════
# Message & Error Models
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Returned by DELETE /pet_store/{id}."""
    message: str = Field(description="Human-readable result message")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code ("validation_error", "not_found", ...)
        message: Human-readable description
        details: Optional extra context (e.g. which ids conflicted)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
