# design_patterns/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all catalog and example errors."""
    pass


class ValidationError(DomainException):
    """Raised when input validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str, message: Optional[str] = None):
        super().__init__(message or f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ResourceLimitExceededError(DomainException):
    """Raised when attempting to exceed resource limits."""
    def __init__(self, resource_type: str, current: int, maximum: int):
        super().__init__(
            f"Cannot exceed {resource_type} limit: {current}/{maximum}"
        )
        self.resource_type = resource_type
        self.current = current
        self.maximum = maximum


class InvalidStateTransitionError(DomainException):
    """Raised when an action is not allowed in the current state."""
    def __init__(self, current_state: str, action: str, subject: str = "object"):
        super().__init__(f"Cannot {action} {subject} in {current_state} state")
        self.current_state = current_state
        self.action = action
        self.subject = subject


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ExampleNotFoundError(ResourceNotFoundError):
    """Raised when the catalog has no example for a pattern/variant pair."""
    def __init__(self, pattern: str, variant: Optional[str] = None):
        if variant:
            message = f"No '{variant}' example registered for pattern '{pattern}'"
        else:
            message = f"Unknown pattern '{pattern}'"
        super().__init__("Example", f"{pattern}/{variant}", message)
        self.pattern = pattern
        self.variant = variant


class QueryBuilderError(ValidationError):
    """Raised when a SQL query builder is used in an invalid order."""
    pass


class UnknownVariableError(ResourceNotFoundError):
    """Raised when an expression refers to a variable with no assigned value."""
    def __init__(self, name: str):
        super().__init__("Variable", name, f"No exist variable: {name}")
        self.name = name


class UnknownChoiceError(ValidationError):
    """Raised when an interactive menu receives an option it does not offer."""
    def __init__(self, choice: str):
        super().__init__(f"Sorry, I'm not sure what you mean by that: {choice!r}")
        self.choice = choice


class UnknownPaymentMethodError(ValidationError):
    """Raised when no payment strategy exists for the requested method."""
    def __init__(self, method: str):
        super().__init__("Unknown Payment Method", {"method": method})
        self.method = method


class PaymentValidationError(ValidationError):
    """Raised when a payment gateway return cannot be validated."""
    pass


class SingletonError(DomainException):
    """Raised when a singleton would be instantiated, copied or unpickled."""
    pass
