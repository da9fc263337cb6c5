"""Core domain primitives shared by every example."""

from design_patterns.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    ExampleNotFoundError,
    InvalidStateTransitionError,
    PaymentValidationError,
    QueryBuilderError,
    ResourceLimitExceededError,
    ResourceNotFoundError,
    SingletonError,
    UnknownChoiceError,
    UnknownPaymentMethodError,
    UnknownVariableError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ResourceNotFoundError",
    "ResourceLimitExceededError",
    "InvalidStateTransitionError",
    "ConfigurationError",
    "ExampleNotFoundError",
    "QueryBuilderError",
    "UnknownVariableError",
    "UnknownChoiceError",
    "UnknownPaymentMethodError",
    "PaymentValidationError",
    "SingletonError",
]
