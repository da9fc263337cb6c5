"""Proxy pattern: conceptual and real-world examples."""
