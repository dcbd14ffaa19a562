"""
Typed exceptions for the contract lifecycle service.

Every error carries a machine-readable ``code`` and the HTTP ``status_code``
used when it reaches the API boundary:

    ContractsError
    +-- ValidationError
    |   +-- InvalidFieldTypeError
    +-- DuplicateNameError
    +-- NotFoundError
    +-- IllegalStateError
    +-- LifecycleError
    |   +-- SameStatusError
    |   +-- UnknownStatusError
    |   +-- IllegalTransitionError
    +-- ConcurrentModificationError
"""


class ContractsError(Exception):
    code = "CONTRACTS_ERROR"
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ContractsError):
    """Missing or malformed caller input."""

    code = "VALIDATION_ERROR"
    status_code = 400


class InvalidFieldTypeError(ValidationError):
    code = "INVALID_FIELD_TYPE"

    def __init__(self, field_type, allowed):
        self.field_type = field_type
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid field type: {field_type}. Must be one of: {', '.join(self.allowed)}"
        )


class DuplicateNameError(ContractsError):
    code = "DUPLICATE_NAME"
    status_code = 400

    def __init__(self, name: str):
        self.name = name
        super().__init__("Blueprint with this name already exists")


class NotFoundError(ContractsError):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class IllegalStateError(ContractsError):
    """Field edit attempted while the contract is immutable."""

    code = "ILLEGAL_STATE"
    status_code = 400

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Cannot modify contract in {status} status")


class LifecycleError(ContractsError):
    """Base for status transition rejections."""

    code = "LIFECYCLE_ERROR"
    status_code = 400

    def __init__(self, current, target, message: str):
        self.current = current
        self.target = target
        super().__init__(message)


class SameStatusError(LifecycleError):
    code = "SAME_STATUS"

    def __init__(self, current):
        super().__init__(current, current, f"Contract is already in status: {current}")


class UnknownStatusError(LifecycleError):
    code = "UNKNOWN_STATUS"

    def __init__(self, current, target):
        super().__init__(current, target, f"Invalid current status: {current}")


class IllegalTransitionError(LifecycleError):
    code = "ILLEGAL_TRANSITION"

    def __init__(self, current, target, allowed):
        self.allowed = list(allowed)
        allowed_str = (
            f"Allowed: {', '.join(self.allowed)}" if self.allowed else "No transitions allowed"
        )
        super().__init__(
            current, target, f"Cannot transition from {current} to {target}. {allowed_str}"
        )


class ConcurrentModificationError(ContractsError):
    code = "CONCURRENT_MODIFICATION"
    status_code = 409

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__("Contract was modified by another request, reload and retry")
