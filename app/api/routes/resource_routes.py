"""
Career Record Routes

Built once per resource (internships, skills, certifications):

GET    /{resource}       - List own records, newest first
GET    /{resource}/{id}  - Get one own record
POST   /{resource}       - Create record owned by the caller
PUT    /{resource}/{id}  - Overwrite own record
DELETE /{resource}/{id}  - Delete own record

Every route requires a bearer token. The guard runs as a router dependency,
so an unauthenticated request is rejected before any service is built.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from pymongo.database import Database

from app.core.auth import get_current_user
from app.db.mongodb import get_mongo_db
from app.schemas.schemas import ErrorResponse, MessageResponse
from app.services.mongo_service import OwnedRecordService, ResourceDefinition

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Missing or owned by another user"}}


def build_resource_router(resource: ResourceDefinition) -> APIRouter:
    """Create the five owner-scoped CRUD routes for one resource."""
    router = APIRouter(
        prefix=f"/{resource.name}",
        tags=[resource.label + "s"],
        dependencies=[Depends(get_current_user)],
        responses={
            401: {"model": ErrorResponse, "description": "Missing or invalid token"},
            500: {"model": ErrorResponse, "description": "Validation or database failure"},
        },
    )

    def get_service(db: Database = Depends(get_mongo_db)) -> OwnedRecordService:
        return OwnedRecordService(resource, db)

    @router.get("")
    async def list_records(
        user: dict = Depends(get_current_user),
        service: OwnedRecordService = Depends(get_service),
    ):
        return service.list(user["_id"])

    @router.get("/{record_id}", responses=NOT_FOUND)
    async def get_record(
        record_id: str,
        user: dict = Depends(get_current_user),
        service: OwnedRecordService = Depends(get_service),
    ):
        return service.get_one(user["_id"], record_id)

    @router.post("", status_code=201)
    async def create_record(
        payload: Any = Body(...),
        user: dict = Depends(get_current_user),
        service: OwnedRecordService = Depends(get_service),
    ):
        return service.create(user["_id"], payload)

    @router.put("/{record_id}", responses=NOT_FOUND)
    async def update_record(
        record_id: str,
        payload: Any = Body(...),
        user: dict = Depends(get_current_user),
        service: OwnedRecordService = Depends(get_service),
    ):
        return service.update(user["_id"], record_id, payload)

    @router.delete("/{record_id}", response_model=MessageResponse, responses=NOT_FOUND)
    async def delete_record(
        record_id: str,
        user: dict = Depends(get_current_user),
        service: OwnedRecordService = Depends(get_service),
    ):
        return service.delete(user["_id"], record_id)

    return router
