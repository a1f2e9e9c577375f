"""
Pet Store Backend: Pet Store Route Handlers
==============================================

What:  REST endpoints under /pet_store.
How:   Each handler logs the action, delegates to PetStoreService, and lets
       FastAPI serialize the returned schema with the declared status code.
       Errors are raised by the service and answered by the global handlers.

Route Inventory:
    POST   /pet_store                         create store            201
    PUT    /pet_store/{pet_store_id}          update store            200
    GET    /pet_store                         list stores (summary)   200
    GET    /pet_store/{pet_store_id}          get store (full)        200
    DELETE /pet_store/{pet_store_id}          delete store            200
    POST   /pet_store/{pet_store_id}/employee upsert employee         201
    POST   /pet_store/{pet_store_id}/customer upsert customer         201
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.database import get_db_session, get_read_only_db_session
from pet_store.schemas.pet_store import (
    ErrorResponse,
    MessageResponse,
    PetStoreCustomer,
    PetStoreData,
    PetStoreEmployee,
)
from pet_store.services.pet_store_service import pet_store_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/pet_store", tags=["Pet Stores"])

NOT_FOUND = {404: {"description": "Pet store not found", "model": ErrorResponse}}
WRONG_STORE = {400: {"description": "Id belongs to a different pet store", "model": ErrorResponse}}


@router.post(
    "",
    response_model=PetStoreData,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
    summary="Create a pet store",
)
async def create_pet_store(
    pet_store_data: PetStoreData,
    db: AsyncSession = Depends(get_db_session),
) -> PetStoreData:
    """
    Create a pet store. A body carrying `pet_store_id` updates that store
    instead, so the endpoint behaves as an upsert.
    """
    logger.info("Creating pet store %s", pet_store_data.pet_store_name)
    return await pet_store_service.save_pet_store(db, pet_store_data)


@router.put(
    "/{pet_store_id}",
    response_model=PetStoreData,
    responses=NOT_FOUND,
    summary="Update a pet store",
)
async def update_pet_store(
    pet_store_id: int,
    pet_store_data: PetStoreData,
    db: AsyncSession = Depends(get_db_session),
) -> PetStoreData:
    """Overwrite a store's scalar fields. The id in the path wins over any id in the body."""
    pet_store_data.pet_store_id = pet_store_id
    logger.info("Updating pet store with ID=%s", pet_store_id)
    return await pet_store_service.save_pet_store(db, pet_store_data)


@router.post(
    "/{pet_store_id}/employee",
    response_model=PetStoreEmployee,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND, **WRONG_STORE},
    summary="Add or update an employee of a pet store",
)
async def add_employee_to_pet_store(
    pet_store_id: int,
    pet_store_employee: PetStoreEmployee,
    db: AsyncSession = Depends(get_db_session),
) -> PetStoreEmployee:
    logger.info("Adding employee %s to pet store with ID=%s", pet_store_employee, pet_store_id)
    return await pet_store_service.save_employee(db, pet_store_id, pet_store_employee)


@router.post(
    "/{pet_store_id}/customer",
    response_model=PetStoreCustomer,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND, **WRONG_STORE},
    summary="Add or update a customer of a pet store",
)
async def add_customer_to_pet_store(
    pet_store_id: int,
    pet_store_customer: PetStoreCustomer,
    db: AsyncSession = Depends(get_db_session),
) -> PetStoreCustomer:
    logger.info("Adding customer %s to pet store with ID=%s", pet_store_customer, pet_store_id)
    return await pet_store_service.save_customer(db, pet_store_id, pet_store_customer)


@router.get(
    "",
    response_model=List[PetStoreData],
    summary="List pet stores",
    description="Returns every store without its employees or customers.",
)
async def retrieve_all_pet_stores(
    db: AsyncSession = Depends(get_read_only_db_session),
) -> List[PetStoreData]:
    logger.info("Retrieving all pet stores")
    return await pet_store_service.retrieve_all_pet_stores(db)


@router.get(
    "/{pet_store_id}",
    response_model=PetStoreData,
    responses=NOT_FOUND,
    summary="Get a pet store with its employees and customers",
)
async def retrieve_pet_store_by_id(
    pet_store_id: int,
    db: AsyncSession = Depends(get_read_only_db_session),
) -> PetStoreData:
    logger.info("Retrieving pet store with ID=%s", pet_store_id)
    return await pet_store_service.retrieve_pet_store_by_id(db, pet_store_id)


@router.delete(
    "/{pet_store_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND,
    summary="Delete a pet store",
    description=(
        "Deletes the store and its employees. Customers are kept; "
        "only their membership in this store is removed."
    ),
)
async def delete_pet_store_by_id(
    pet_store_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    logger.info("Deleting pet store with ID=%s", pet_store_id)
    await pet_store_service.delete_pet_store_by_id(db, pet_store_id)
    return MessageResponse(message=f"Pet store with ID={pet_store_id} was deleted successfully")
