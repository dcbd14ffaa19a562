from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contracts_api.services.blueprint_service import BlueprintService
from contracts_api.services.contract_service import ContractService
from contracts_core.db import get_db


def get_blueprint_service(db: AsyncSession = Depends(get_db)) -> BlueprintService:
    return BlueprintService(db)


def get_contract_service(db: AsyncSession = Depends(get_db)) -> ContractService:
    return ContractService(db)
