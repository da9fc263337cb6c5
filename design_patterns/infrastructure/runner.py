"""Example runner - resolves catalog examples and executes their drivers."""

import inspect
import os
from typing import Any, Callable, Dict, List, Optional

from design_patterns.config.schemas import CatalogConfig
from design_patterns.infrastructure.logging.logger import get_structured_logger
from design_patterns.infrastructure.registry.example_registry import (
    ExampleRegistration,
    ExampleRegistry,
)


class ExampleRunner:
    """
    Runs registered examples.

    Example drivers declare the settings they need as keyword parameters of
    main(); the runner inspects the signature and passes only those:

    - input_func: callable used instead of input() by interactive examples
    - output_dir: directory for examples that append to a log file
    - latency: seconds per simulated network tick
    """

    def __init__(self,
                 config: Optional[CatalogConfig] = None,
                 registry: Optional[ExampleRegistry] = None,
                 input_func: Callable[[], str] = input):
        self._config = config or CatalogConfig()
        self._registry = registry or ExampleRegistry.get_instance()
        self._input_func = input_func
        self._logger = get_structured_logger(__name__)

    def _settings(self) -> Dict[str, Any]:
        return {
            "input_func": self._input_func,
            "output_dir": self._config.output_dir,
            "latency": self._config.network_latency,
        }

    def _build_kwargs(self, driver: Callable[..., None]) -> Dict[str, Any]:
        parameters = inspect.signature(driver).parameters
        kwargs = {name: value for name, value in self._settings().items() if name in parameters}
        if "output_dir" in kwargs:
            os.makedirs(kwargs["output_dir"], exist_ok=True)
        return kwargs

    def run_registration(self, registration: ExampleRegistration) -> Dict[str, Any]:
        """Run one registered example and describe the outcome."""
        driver = registration.load()
        kwargs = self._build_kwargs(driver)

        self._logger.info(
            "Running example",
            pattern=registration.pattern,
            variant=registration.variant,
            settings=sorted(kwargs),
        )
        driver(**kwargs)
        self._logger.info("Example finished", pattern=registration.pattern, variant=registration.variant)

        return {
            "pattern": registration.pattern,
            "variant": registration.variant,
            "module": registration.module,
            "status": "completed",
        }

    def run(self, pattern: str, variant: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Run one variant of a pattern, or all of its variants.

        Args:
            pattern: Pattern name in any spelling the registry accepts
            variant: 'conceptual', 'real_world', 'all' or None for the configured default

        Returns:
            One result dictionary per executed example

        Raises:
            ExampleNotFoundError: If the pattern or variant is not registered
        """
        variant = variant or self._config.default_variant
        if variant == "all":
            registrations = self._registry.get_variants(pattern)
        else:
            registrations = [self._registry.get_registration(pattern, variant)]

        results = []
        for index, registration in enumerate(registrations):
            if index:
                print()
            results.append(self.run_registration(registration))
        return results
