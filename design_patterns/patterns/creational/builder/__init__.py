"""Builder pattern: conceptual and real-world examples."""
