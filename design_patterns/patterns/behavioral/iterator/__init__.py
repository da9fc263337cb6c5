"""Iterator pattern: conceptual and real-world examples."""
