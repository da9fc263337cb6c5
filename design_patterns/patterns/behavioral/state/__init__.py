"""State pattern: conceptual and real-world examples."""
