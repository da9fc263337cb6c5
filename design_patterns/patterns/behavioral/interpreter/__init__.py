"""Interpreter pattern: conceptual and real-world examples."""
