from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, StrictBool, StrictStr, TypeAdapter

from contracts_api.schemas.common import ApiResponse, CamelModel
from contracts_api.services.lifecycle import ContractStatus


class TextFieldValue(CamelModel):
    field_id: str
    type: Literal["text"]
    label: str
    value: Optional[StrictStr] = None


class DateFieldValue(CamelModel):
    field_id: str
    type: Literal["date"]
    label: str
    value: Optional[StrictStr] = None


class SignatureFieldValue(CamelModel):
    field_id: str
    type: Literal["signature"]
    label: str
    value: Optional[StrictBool] = None


class CheckboxFieldValue(CamelModel):
    field_id: str
    type: Literal["checkbox"]
    label: str
    value: Optional[StrictBool] = None


FieldValue = Annotated[
    Union[TextFieldValue, DateFieldValue, SignatureFieldValue, CheckboxFieldValue],
    Field(discriminator="type"),
]

field_values_adapter = TypeAdapter(List[FieldValue])


class ContractCreate(CamelModel):
    name: str
    blueprint_id: str


class FieldValuesUpdate(CamelModel):
    field_values: List[FieldValue]


class StatusUpdate(CamelModel):
    # Unknown targets are rejected by the lifecycle rules, not by parsing
    status: str


class ContractSummary(CamelModel):
    id: str
    name: str
    blueprint_id: str
    blueprint_name: str
    status: ContractStatus
    version: int
    created_at: datetime
    updated_at: datetime


class ContractOut(ContractSummary):
    field_values: List[FieldValue]


class NextStatusesOut(CamelModel):
    current_status: ContractStatus
    next_statuses: List[ContractStatus]


class StatusUpdateResponse(ApiResponse[ContractOut]):
    message: str
