"""Command pattern: conceptual and real-world examples."""
