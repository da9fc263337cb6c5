"""Singleton pattern: conceptual and real-world examples."""
