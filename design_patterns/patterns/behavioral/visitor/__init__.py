"""Visitor pattern: conceptual and real-world examples."""
