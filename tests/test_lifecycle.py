"""Tests for the contract status state machine."""

import pytest

from contracts_api.services import lifecycle
from contracts_api.services.lifecycle import ContractStatus
from contracts_core.exceptions import (
    IllegalTransitionError,
    LifecycleError,
    SameStatusError,
    UnknownStatusError,
)

ALL_STATUSES = list(ContractStatus)

LEGAL = {
    (ContractStatus.CREATED, ContractStatus.APPROVED),
    (ContractStatus.CREATED, ContractStatus.REVOKED),
    (ContractStatus.APPROVED, ContractStatus.SENT),
    (ContractStatus.SENT, ContractStatus.SIGNED),
    (ContractStatus.SENT, ContractStatus.REVOKED),
    (ContractStatus.SIGNED, ContractStatus.LOCKED),
}


# =============================================================================
# validate_transition
# =============================================================================

@pytest.mark.parametrize("status", ALL_STATUSES)
def test_self_transition_is_rejected(status):
    with pytest.raises(SameStatusError) as exc_info:
        lifecycle.validate_transition(status, status)
    assert exc_info.value.message == f"Contract is already in status: {status.value}"


def test_self_transition_checked_before_unknown_status():
    with pytest.raises(SameStatusError):
        lifecycle.validate_transition("ARCHIVED", "ARCHIVED")


@pytest.mark.parametrize("current", ["ARCHIVED", "created", "", None])
def test_unknown_current_status(current):
    with pytest.raises(UnknownStatusError) as exc_info:
        lifecycle.validate_transition(current, ContractStatus.APPROVED)
    assert exc_info.value.message == f"Invalid current status: {current}"


@pytest.mark.parametrize("current", ALL_STATUSES)
@pytest.mark.parametrize("target", ALL_STATUSES)
def test_transition_closure_matches_table(current, target):
    if current == target:
        return
    if (current, target) in LEGAL:
        lifecycle.validate_transition(current, target)
        assert lifecycle.is_valid_transition(current, target)
    else:
        with pytest.raises(IllegalTransitionError):
            lifecycle.validate_transition(current, target)
        assert not lifecycle.is_valid_transition(current, target)


def test_created_cannot_skip_to_sent():
    with pytest.raises(IllegalTransitionError) as exc_info:
        lifecycle.validate_transition("CREATED", "SENT")
    assert exc_info.value.message == "Cannot transition from CREATED to SENT. Allowed: APPROVED, REVOKED"


def test_terminal_status_message():
    with pytest.raises(IllegalTransitionError) as exc_info:
        lifecycle.validate_transition("LOCKED", "CREATED")
    assert exc_info.value.message == "Cannot transition from LOCKED to CREATED. No transitions allowed"
    assert exc_info.value.allowed == []


def test_raw_strings_and_enum_members_are_interchangeable():
    lifecycle.validate_transition("CREATED", ContractStatus.APPROVED)
    lifecycle.validate_transition(ContractStatus.SIGNED, "LOCKED")


def test_unknown_target_is_an_illegal_transition():
    with pytest.raises(IllegalTransitionError):
        lifecycle.validate_transition("CREATED", "ARCHIVED")


def test_rejections_share_a_base_class():
    for current, target in [("SENT", "SENT"), ("NOPE", "SENT"), ("SENT", "LOCKED")]:
        with pytest.raises(LifecycleError):
            lifecycle.validate_transition(current, target)


# =============================================================================
# next_statuses
# =============================================================================

@pytest.mark.parametrize("status,expected", [
    ("CREATED", ["APPROVED", "REVOKED"]),
    ("APPROVED", ["SENT"]),
    ("SENT", ["SIGNED", "REVOKED"]),
    ("SIGNED", ["LOCKED"]),
    ("LOCKED", []),
    ("REVOKED", []),
])
def test_next_statuses(status, expected):
    assert lifecycle.next_statuses(status) == expected


@pytest.mark.parametrize("status", [["CREATED"], {"CREATED": 1}, 42])
def test_next_statuses_non_string_is_empty(status):
    assert lifecycle.next_statuses(status) == []


@pytest.mark.parametrize("status", ["ARCHIVED", "", None])
def test_next_statuses_unknown_is_empty(status):
    assert lifecycle.next_statuses(status) == []


def test_next_statuses_returns_a_copy():
    result = lifecycle.next_statuses("CREATED")
    result.clear()
    assert lifecycle.next_statuses("CREATED") == ["APPROVED", "REVOKED"]


# =============================================================================
# Predicates
# =============================================================================

@pytest.mark.parametrize("status", ALL_STATUSES)
def test_can_modify_fields(status):
    expected = status not in (ContractStatus.LOCKED, ContractStatus.REVOKED)
    assert lifecycle.can_modify_fields(status) is expected
    assert lifecycle.can_modify_fields(status.value) is expected


def test_signed_contract_is_still_editable():
    assert lifecycle.can_modify_fields("SIGNED")


@pytest.mark.parametrize("status,expected", [
    ("CREATED", True),
    ("APPROVED", True),
    ("SENT", False),
    ("SIGNED", False),
    ("LOCKED", False),
    ("REVOKED", True),
])
def test_can_delete(status, expected):
    assert lifecycle.can_delete(status) is expected


@pytest.mark.parametrize("status", ALL_STATUSES)
def test_is_terminal(status):
    assert lifecycle.is_terminal(status) is (status in (ContractStatus.LOCKED, ContractStatus.REVOKED))


def test_unknown_status_is_not_terminal():
    assert not lifecycle.is_terminal("ARCHIVED")
