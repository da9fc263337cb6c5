"""Composite pattern: conceptual and real-world examples."""
