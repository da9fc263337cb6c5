"""Strategy pattern: conceptual and real-world examples."""
