"""
Contract lifecycle state machine.

Statuses move along a fixed directed graph:

    CREATED  -> APPROVED | REVOKED
    APPROVED -> SENT
    SENT     -> SIGNED | REVOKED
    SIGNED   -> LOCKED
    LOCKED, REVOKED are terminal

Everything here is a pure decision function. Callers apply the new status
themselves after ``validate_transition`` returns.
"""

from enum import Enum
from typing import Dict, List, Union

from contracts_core.exceptions import (
    IllegalTransitionError,
    SameStatusError,
    UnknownStatusError,
)


class ContractStatus(str, Enum):
    CREATED = "CREATED"
    APPROVED = "APPROVED"
    SENT = "SENT"
    SIGNED = "SIGNED"
    LOCKED = "LOCKED"
    REVOKED = "REVOKED"

    def __str__(self):
        return self.value


StatusLike = Union[ContractStatus, str]

VALID_TRANSITIONS: Dict[ContractStatus, List[ContractStatus]] = {
    ContractStatus.CREATED: [ContractStatus.APPROVED, ContractStatus.REVOKED],
    ContractStatus.APPROVED: [ContractStatus.SENT],
    ContractStatus.SENT: [ContractStatus.SIGNED, ContractStatus.REVOKED],
    ContractStatus.SIGNED: [ContractStatus.LOCKED],
    ContractStatus.LOCKED: [],
    ContractStatus.REVOKED: [],
}

IMMUTABLE_STATUSES = frozenset({ContractStatus.LOCKED, ContractStatus.REVOKED})
PROTECTED_STATUSES = frozenset({ContractStatus.SENT, ContractStatus.SIGNED, ContractStatus.LOCKED})

# Named groups accepted by the contract list filter
STATUS_GROUPS: Dict[str, List[ContractStatus]] = {
    "active": [ContractStatus.CREATED, ContractStatus.APPROVED, ContractStatus.SENT],
    "pending": [ContractStatus.CREATED, ContractStatus.APPROVED],
    "signed": [ContractStatus.SIGNED, ContractStatus.LOCKED],
}


def validate_transition(current: StatusLike, target: StatusLike) -> None:
    """
    Raise if ``current -> target`` is not a legal move.

    Self-transitions are rejected first, then an unrecognized current status,
    then any target outside the allowed set.
    """
    if current == target:
        raise SameStatusError(current)

    allowed = VALID_TRANSITIONS.get(current)
    if allowed is None:
        raise UnknownStatusError(current, target)

    if target not in allowed:
        raise IllegalTransitionError(current, target, allowed)


def is_valid_transition(current: StatusLike, target: StatusLike) -> bool:
    return current != target and target in VALID_TRANSITIONS.get(current, [])


def next_statuses(current: StatusLike) -> List[ContractStatus]:
    """Allowed targets for ``current``; empty for terminal or unknown input."""
    if not isinstance(current, str):
        return []
    return list(VALID_TRANSITIONS.get(current, []))


def can_modify_fields(status: StatusLike) -> bool:
    # SIGNED stays editable, only LOCKED freezes the data
    return status not in IMMUTABLE_STATUSES


def can_delete(status: StatusLike) -> bool:
    """Deletion policy. No endpoint uses it yet."""
    return status not in PROTECTED_STATUSES


def is_terminal(status: StatusLike) -> bool:
    return status in VALID_TRANSITIONS and not VALID_TRANSITIONS[status]
