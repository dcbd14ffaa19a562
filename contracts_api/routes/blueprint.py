from fastapi import APIRouter, Depends, status

from contracts_api.dependencies import get_blueprint_service
from contracts_api.schemas.blueprint import BlueprintCreate, BlueprintOut
from contracts_api.schemas.common import ApiResponse, ErrorResponse, ListResponse
from contracts_api.services.blueprint_service import BlueprintService

router = APIRouter(
    prefix="/api/blueprints",
    tags=["Blueprint"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=ApiResponse[BlueprintOut], status_code=status.HTTP_201_CREATED)
async def create_blueprint(
    request: BlueprintCreate,
    service: BlueprintService = Depends(get_blueprint_service),
):
    blueprint = await service.create(request.name, request.fields)
    return {"success": True, "data": blueprint}


@router.get("", response_model=ListResponse[BlueprintOut])
async def list_blueprints(service: BlueprintService = Depends(get_blueprint_service)):
    blueprints = await service.list()
    return {"success": True, "count": len(blueprints), "data": blueprints}


@router.get("/{blueprint_id}", response_model=ApiResponse[BlueprintOut])
async def get_blueprint(
    blueprint_id: str,
    service: BlueprintService = Depends(get_blueprint_service),
):
    blueprint = await service.get_by_id(blueprint_id)
    return {"success": True, "data": blueprint}
