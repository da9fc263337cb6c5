"""Registry package for catalog examples."""

from design_patterns.infrastructure.registry.example_registry import (
    ExampleRegistration,
    ExampleRegistry,
    normalize_pattern_name,
)

__all__ = ["ExampleRegistry", "ExampleRegistration", "normalize_pattern_name"]
