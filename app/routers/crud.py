"""
Admin management endpoints built from a ResourceSpec.

Every managed resource gets the same list/get/create/update/delete routes,
all behind the admin session check.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.routers.auth import get_current_admin
from app.services.crud_service import CrudService, ResourceSpec


def build_crud_router(resource: ResourceSpec) -> APIRouter:
    router = APIRouter(dependencies=[Depends(get_current_admin)])

    CreateSchema = resource.create_schema
    UpdateSchema = resource.update_schema
    ResponseSchema = resource.response_schema

    @router.get("", response_model=List[ResponseSchema], name=f"admin_list_{resource.path}")
    async def list_items(db: Session = Depends(get_db)):
        items = CrudService(db, resource).list(order_by=resource.admin_order)
        return [ResponseSchema.model_validate(item) for item in items]

    @router.get("/{item_id}", response_model=ResponseSchema, name=f"admin_get_{resource.path}")
    async def get_item(item_id: str, db: Session = Depends(get_db)):
        item = CrudService(db, resource).get_or_404(item_id)
        return ResponseSchema.model_validate(item)

    @router.post(
        "",
        response_model=ResponseSchema,
        status_code=status.HTTP_201_CREATED,
        name=f"admin_create_{resource.path}",
    )
    async def create_item(payload: CreateSchema, db: Session = Depends(get_db)):
        item = CrudService(db, resource).create(payload.model_dump(mode="json"))
        return ResponseSchema.model_validate(item)

    @router.put("/{item_id}", response_model=ResponseSchema, name=f"admin_update_{resource.path}")
    async def update_item(item_id: str, payload: UpdateSchema, db: Session = Depends(get_db)):
        data = payload.model_dump(mode="json", exclude_unset=True)
        item = CrudService(db, resource).update(item_id, data)
        return ResponseSchema.model_validate(item)

    @router.delete(
        "/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"admin_delete_{resource.path}",
    )
    async def delete_item(item_id: str, db: Session = Depends(get_db)):
        CrudService(db, resource).delete(item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
