"""Facade pattern: conceptual and real-world examples."""
