from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from contracts_api.dependencies import get_contract_service
from contracts_api.schemas.common import ApiResponse, ErrorResponse, ListResponse
from contracts_api.schemas.contract import (
    ContractCreate,
    ContractOut,
    ContractSummary,
    FieldValuesUpdate,
    NextStatusesOut,
    StatusUpdate,
    StatusUpdateResponse,
)
from contracts_api.services.contract_service import ContractService

router = APIRouter(
    prefix="/api/contracts",
    tags=["Contract"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)


@router.post("", response_model=ApiResponse[ContractOut], status_code=status.HTTP_201_CREATED)
async def create_contract(
    request: ContractCreate,
    service: ContractService = Depends(get_contract_service),
):
    contract = await service.create(request.name, request.blueprint_id)
    return {"success": True, "data": contract}


@router.get("", response_model=ListResponse[ContractSummary])
async def list_contracts(
    status: Optional[str] = Query(None, description="Exact status or one of: active, pending, signed"),
    blueprint_id: Optional[str] = Query(None, alias="blueprintId"),
    service: ContractService = Depends(get_contract_service),
):
    # Summaries only, fieldValues are left out of the list view
    contracts = await service.list(status=status, blueprint_id=blueprint_id)
    return {"success": True, "count": len(contracts), "data": contracts}


@router.get("/{contract_id}", response_model=ApiResponse[ContractOut])
async def get_contract(
    contract_id: str,
    service: ContractService = Depends(get_contract_service),
):
    contract = await service.get_by_id(contract_id)
    return {"success": True, "data": contract}


@router.put("/{contract_id}/fields", response_model=ApiResponse[ContractOut])
async def update_contract_fields(
    contract_id: str,
    request: FieldValuesUpdate,
    service: ContractService = Depends(get_contract_service),
):
    contract = await service.update_fields(contract_id, request.field_values)
    return {"success": True, "data": contract}


@router.put("/{contract_id}/status", response_model=StatusUpdateResponse)
async def update_contract_status(
    contract_id: str,
    request: StatusUpdate,
    service: ContractService = Depends(get_contract_service),
):
    contract, previous = await service.update_status(contract_id, request.status)
    return {
        "success": True,
        "data": contract,
        "message": f"Status updated from {previous} to {contract.status}",
    }


@router.get("/{contract_id}/next-statuses", response_model=ApiResponse[NextStatusesOut])
async def get_next_statuses(
    contract_id: str,
    service: ContractService = Depends(get_contract_service),
):
    current, allowed = await service.next_statuses(contract_id)
    return {"success": True, "data": {"current_status": current, "next_statuses": allowed}}
