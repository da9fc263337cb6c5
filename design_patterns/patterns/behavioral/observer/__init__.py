"""Observer pattern: conceptual and real-world examples."""
