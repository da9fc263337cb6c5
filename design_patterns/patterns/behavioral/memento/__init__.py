"""Memento pattern: conceptual and real-world examples."""
