import logging
from typing import Callable, Iterable

import pytest

from design_patterns.infrastructure.logging.logger import PACKAGE_LOGGER
from design_patterns.infrastructure.registry import ExampleRegistry
from design_patterns.patterns.behavioral.command.real_world import Queue
from design_patterns.patterns.behavioral.mediator.real_world import events
from design_patterns.patterns.creational.singleton import conceptual as singleton_conceptual
from design_patterns.patterns.creational.singleton import real_world as singleton_real_world


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Give every test fresh singletons, queues and registries."""
    singleton_conceptual.Singleton.reset_instances()
    singleton_real_world.Singleton.reset_instances()
    Queue.reset()
    events.cache_clear()
    ExampleRegistry.reset_instance()
    yield
    singleton_conceptual.Singleton.reset_instances()
    singleton_real_world.Singleton.reset_instances()
    Queue.reset()
    events.cache_clear()
    ExampleRegistry.reset_instance()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler changes made by setup_logging()."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers[:]:
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in package_logger.handlers:
            package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[], str]]:
    """Build an input() replacement that answers from a list of lines."""

    def factory(lines: Iterable[str]) -> Callable[[], str]:
        answers = iter(lines)

        def input_func(*args) -> str:
            try:
                return next(answers)
            except StopIteration:
                raise EOFError from None

        return input_func

    return factory
