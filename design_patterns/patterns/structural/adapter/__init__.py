"""Adapter pattern: conceptual and real-world examples."""
