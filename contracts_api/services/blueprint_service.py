import logging
import uuid
from typing import Any, Dict, Iterable, List

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from contracts_api.models.blueprint import Blueprint
from contracts_api.schemas.blueprint import FieldType
from contracts_core.exceptions import (
    DuplicateNameError,
    InvalidFieldTypeError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

FIELD_TYPES = [t.value for t in FieldType]


class BlueprintService:
    """Registry of field templates that seed new contracts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, fields: Iterable[Any]) -> Blueprint:
        name = (name or "").strip()
        if not name or fields is None:
            raise ValidationError("Name and fields array are required")

        templates = [self._build_field(field) for field in fields]

        result = await self.db.execute(select(Blueprint.id).where(Blueprint.name == name))
        if result.scalars().first() is not None:
            raise DuplicateNameError(name)

        blueprint = Blueprint(name=name, fields=templates)
        self.db.add(blueprint)
        try:
            await self.db.commit()
        except IntegrityError:
            # Lost a race against another create with the same name
            await self.db.rollback()
            raise DuplicateNameError(name)

        logger.info(f"Created blueprint {blueprint.id} ({name}) with {len(templates)} fields")
        return blueprint

    async def list(self) -> List[Blueprint]:
        result = await self.db.execute(select(Blueprint).order_by(Blueprint.created_at.desc()))
        return list(result.scalars().all())

    async def get_by_id(self, blueprint_id: str) -> Blueprint:
        blueprint = await self.db.get(Blueprint, blueprint_id)
        if blueprint is None:
            raise NotFoundError("Blueprint", blueprint_id)
        return blueprint

    @staticmethod
    def _build_field(field: Any) -> Dict[str, Any]:
        if isinstance(field, BaseModel):
            field = field.model_dump()

        field_type = field.get("type")
        if field_type not in FIELD_TYPES:
            raise InvalidFieldTypeError(field_type, FIELD_TYPES)

        label = (field.get("label") or "").strip()
        if not label:
            raise ValidationError("Field label is required")

        position = field.get("position") or {}
        return {
            "fieldId": str(uuid.uuid4()),
            "type": field_type,
            "label": label,
            "position": {"x": position.get("x", 0), "y": position.get("y", 0)},
        }
