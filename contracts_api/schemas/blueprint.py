from datetime import datetime
from enum import Enum
from typing import List

from pydantic import Field

from contracts_api.schemas.common import CamelModel


class FieldType(str, Enum):
    TEXT = "text"
    DATE = "date"
    SIGNATURE = "signature"
    CHECKBOX = "checkbox"

    def __str__(self):
        return self.value


class Position(CamelModel):
    x: float = 0
    y: float = 0


class FieldTemplateCreate(CamelModel):
    # Kept as a plain string so unknown types get the registry's own message
    type: str
    label: str
    position: Position = Field(default_factory=Position)


class BlueprintCreate(CamelModel):
    name: str
    fields: List[FieldTemplateCreate]


class FieldTemplate(CamelModel):
    field_id: str
    type: FieldType
    label: str
    position: Position


class BlueprintOut(CamelModel):
    id: str
    name: str
    fields: List[FieldTemplate]
    created_at: datetime
    updated_at: datetime
