"""Mediator pattern: conceptual and real-world examples."""
