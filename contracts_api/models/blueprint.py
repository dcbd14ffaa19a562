import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, JSON, DateTime
from contracts_core.db import Base


def _uuid():
    return str(uuid.uuid4())


def _now():
    return datetime.now(timezone.utc)


class Blueprint(Base):
    __tablename__ = "blueprints"

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(255), nullable=False, unique=True)
    # [{"fieldId", "type", "label", "position": {"x", "y"}}, ...]
    fields = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), default=_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now)
