"""Example Registry - Registry pattern for the catalog's runnable examples.

Maps (pattern, variant) pairs to the modules implementing them, so the CLI
and the runner never hard-code the list of examples.
"""

import importlib
import re
import threading
from typing import Callable, Dict, List, Optional, Tuple

from design_patterns.domain.core.exceptions import ExampleNotFoundError
from design_patterns.infrastructure.logging.logger import get_logger

CATEGORIES = ("creational", "structural", "behavioral")
VARIANTS = ("conceptual", "real_world")


def normalize_pattern_name(name: str) -> str:
    """Normalize 'Chain of Responsibility', 'chain-of-responsibility' and 'ChainOfResponsibility'."""
    name = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", name.strip())
    return re.sub(r"[\s\-_]+", "_", name).lower()


class ExampleRegistration:
    """Container for example registration information."""

    def __init__(self,
                 pattern: str,
                 variant: str,
                 category: str,
                 module: str,
                 summary: str = "",
                 interactive: bool = False):
        """
        Initialize example registration.

        Args:
            pattern: Human readable pattern name (e.g., 'Chain of Responsibility')
            variant: 'conceptual' or 'real_world'
            category: 'creational', 'structural' or 'behavioral'
            module: Dotted path of the module holding the example's main()
            summary: One-line description of the scenario
            interactive: Whether the example reads from standard input
        """
        self.pattern = pattern
        self.variant = variant
        self.category = category
        self.module = module
        self.summary = summary
        self.interactive = interactive

    @property
    def key(self) -> Tuple[str, str]:
        return normalize_pattern_name(self.pattern), self.variant

    def load(self) -> Callable[..., None]:
        """Import the example module and return its main() driver."""
        module = importlib.import_module(self.module)
        return getattr(module, "main")

    def to_dict(self) -> Dict[str, object]:
        return {
            "pattern": self.pattern,
            "variant": self.variant,
            "category": self.category,
            "module": self.module,
            "summary": self.summary,
            "interactive": self.interactive,
        }


class ExampleRegistry:
    """
    Registry of catalog examples.

    New examples are added by registering them, without touching the CLI or
    the runner.

    Thread-safe singleton implementation.
    """

    _instance: Optional["ExampleRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize example registry."""
        self._registrations: Dict[Tuple[str, str], ExampleRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "ExampleRegistry":
        """Get singleton instance of example registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton instance (used by tests)."""
        with cls._lock:
            cls._instance = None

    def register_example(self,
                         pattern: str,
                         variant: str,
                         category: str,
                         module: str,
                         summary: str = "",
                         interactive: bool = False) -> ExampleRegistration:
        """
        Register an example.

        Raises:
            ValueError: If the variant or category is unknown, or the example is already registered
        """
        if variant not in VARIANTS:
            raise ValueError(f"Unknown variant '{variant}'. Must be one of: {list(VARIANTS)}")
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category '{category}'. Must be one of: {list(CATEGORIES)}")

        registration = ExampleRegistration(
            pattern=pattern,
            variant=variant,
            category=category,
            module=module,
            summary=summary,
            interactive=interactive,
        )

        with self._registration_lock:
            if registration.key in self._registrations:
                raise ValueError(f"Example '{pattern}/{variant}' is already registered")
            self._registrations[registration.key] = registration

        self._logger.debug(f"Registered example: {pattern}/{variant}")
        return registration

    def is_registered(self, pattern: str, variant: Optional[str] = None) -> bool:
        """Check whether a pattern (optionally a specific variant) is registered."""
        name = normalize_pattern_name(pattern)
        if variant is None:
            return any(key[0] == name for key in self._registrations)
        return (name, variant) in self._registrations

    def get_registration(self, pattern: str, variant: str) -> ExampleRegistration:
        """
        Get the registration for a pattern variant.

        Raises:
            ExampleNotFoundError: If the pattern or the variant is not registered
        """
        if not self.is_registered(pattern):
            raise ExampleNotFoundError(pattern)
        registration = self._registrations.get((normalize_pattern_name(pattern), variant))
        if registration is None:
            raise ExampleNotFoundError(pattern, variant)
        return registration

    def get_variants(self, pattern: str) -> List[ExampleRegistration]:
        """Get every registered variant of a pattern, conceptual first."""
        if not self.is_registered(pattern):
            raise ExampleNotFoundError(pattern)
        name = normalize_pattern_name(pattern)
        return [self._registrations[(name, variant)]
                for variant in VARIANTS if (name, variant) in self._registrations]

    def list_examples(self, category: Optional[str] = None) -> List[ExampleRegistration]:
        """List registrations sorted by category, pattern and variant."""
        registrations = [
            registration for registration in self._registrations.values()
            if category is None or registration.category == category
        ]
        return sorted(
            registrations,
            key=lambda r: (CATEGORIES.index(r.category), r.key[0], VARIANTS.index(r.variant)),
        )

    def list_patterns(self, category: Optional[str] = None) -> List[str]:
        """List distinct pattern names in catalog order."""
        patterns: List[str] = []
        for registration in self.list_examples(category):
            if registration.pattern not in patterns:
                patterns.append(registration.pattern)
        return patterns

    def clear(self) -> None:
        """Remove all registrations."""
        with self._registration_lock:
            self._registrations.clear()
