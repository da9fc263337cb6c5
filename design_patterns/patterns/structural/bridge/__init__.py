"""Bridge pattern: conceptual and real-world examples."""
