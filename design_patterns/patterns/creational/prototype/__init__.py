"""Prototype pattern: conceptual and real-world examples."""
