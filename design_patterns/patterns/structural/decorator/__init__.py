"""Decorator pattern: conceptual and real-world examples."""
