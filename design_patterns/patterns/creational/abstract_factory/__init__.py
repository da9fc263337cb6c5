"""Abstract Factory pattern: conceptual and real-world examples."""
