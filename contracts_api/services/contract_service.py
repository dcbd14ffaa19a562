import logging
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm.exc import StaleDataError

from contracts_api.models.contract import Contract
from contracts_api.schemas.contract import field_values_adapter
from contracts_api.services import lifecycle
from contracts_api.services.blueprint_service import BlueprintService
from contracts_api.services.lifecycle import ContractStatus, STATUS_GROUPS
from contracts_core.exceptions import (
    ConcurrentModificationError,
    IllegalStateError,
    LifecycleError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ContractService:
    """
    Contract instances and their lifecycle.

    Status changes and field edits are gated by the rules in
    ``contracts_api.services.lifecycle``. Writes are guarded by the contract's
    row version, so a request that read stale data fails instead of
    overwriting a concurrent update.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, blueprint_id: str) -> Contract:
        name = (name or "").strip()
        if not name or not blueprint_id:
            raise ValidationError("Name and blueprintId are required")

        blueprint = await BlueprintService(self.db).get_by_id(blueprint_id)

        # Snapshot of the blueprint as it is right now
        field_values = [
            {
                "fieldId": field["fieldId"],
                "type": field["type"],
                "label": field["label"],
                "value": None,
            }
            for field in blueprint.fields
        ]

        contract = Contract(
            name=name,
            blueprint_id=blueprint.id,
            blueprint_name=blueprint.name,
            field_values=field_values,
            status=ContractStatus.CREATED.value,
        )
        self.db.add(contract)
        await self.db.commit()

        logger.info(f"Created contract {contract.id} from blueprint {blueprint.id}")
        return contract

    async def list(
        self,
        status: Optional[str] = None,
        blueprint_id: Optional[str] = None,
    ) -> List[Contract]:
        stmt = select(Contract)

        if status:
            group = STATUS_GROUPS.get(status)
            if group is not None:
                stmt = stmt.where(Contract.status.in_([s.value for s in group]))
            else:
                stmt = stmt.where(Contract.status == status)

        if blueprint_id:
            stmt = stmt.where(Contract.blueprint_id == blueprint_id)

        result = await self.db.execute(stmt.order_by(Contract.created_at.desc()))
        return list(result.scalars().all())

    async def get_by_id(self, contract_id: str) -> Contract:
        contract = await self.db.get(Contract, contract_id)
        if contract is None:
            raise NotFoundError("Contract", contract_id)
        return contract

    async def update_fields(self, contract_id: str, field_values: Sequence[Any]) -> Contract:
        if field_values is None:
            raise ValidationError("fieldValues must be an array")

        contract = await self.get_by_id(contract_id)

        if not lifecycle.can_modify_fields(contract.status):
            logger.warning(f"Rejected field update on contract {contract_id} in {contract.status}")
            raise IllegalStateError(contract.status)

        try:
            values = field_values_adapter.validate_python(list(field_values))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid fieldValues: {e.errors()[0]['msg']}")

        self._check_shape(contract.field_values, values)

        # Whole-list replacement, no per-field merge
        contract.field_values = [v.model_dump(by_alias=True) for v in values]
        await self._commit(contract_id)
        return contract

    async def update_status(self, contract_id: str, new_status: str) -> Tuple[Contract, str]:
        """Apply a validated transition. Returns the contract and its previous status."""
        if not new_status:
            raise ValidationError("Status is required")

        contract = await self.get_by_id(contract_id)
        previous = contract.status

        try:
            lifecycle.validate_transition(previous, new_status)
        except LifecycleError as e:
            logger.warning(f"Rejected status change on contract {contract_id}: {e.message}")
            raise

        contract.status = ContractStatus(new_status).value
        await self._commit(contract_id)

        logger.info(f"Contract {contract_id} moved from {previous} to {contract.status}")
        return contract, previous

    async def next_statuses(self, contract_id: str) -> Tuple[str, List[ContractStatus]]:
        contract = await self.get_by_id(contract_id)
        return contract.status, lifecycle.next_statuses(contract.status)

    async def _commit(self, contract_id: str):
        try:
            await self.db.commit()
        except StaleDataError:
            await self.db.rollback()
            logger.warning(f"Concurrent modification detected on contract {contract_id}")
            raise ConcurrentModificationError(contract_id)

    @staticmethod
    def _check_shape(stored, values):
        stored = stored or []
        if len(values) != len(stored):
            raise ValidationError(
                f"Expected {len(stored)} field values, got {len(values)}"
            )
        for index, (current, new) in enumerate(zip(stored, values)):
            if (
                new.field_id != current["fieldId"]
                or new.type != current["type"]
                or new.label != current["label"]
            ):
                raise ValidationError(
                    f"Field value at position {index} does not match field {current['fieldId']}"
                )
