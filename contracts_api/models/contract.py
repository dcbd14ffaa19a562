from sqlalchemy import Column, Integer, String, JSON, DateTime
from contracts_core.db import Base
from contracts_api.models.blueprint import _now, _uuid
from contracts_api.services.lifecycle import ContractStatus


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(255), nullable=False)

    # Weak reference, resolved only when the contract is created
    blueprint_id = Column(String(36), nullable=False, index=True)
    blueprint_name = Column(String(255), nullable=False)

    status = Column(String(16), nullable=False, default=ContractStatus.CREATED.value, index=True)
    # [{"fieldId", "type", "label", "value"}, ...]
    field_values = Column(JSON, nullable=False, default=list)

    version = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), default=_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now)

    __mapper_args__ = {"version_id_col": version}
