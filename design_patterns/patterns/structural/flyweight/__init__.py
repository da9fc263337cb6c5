"""Flyweight pattern: conceptual and real-world examples."""
