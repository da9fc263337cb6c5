"""Factory Method pattern: conceptual and real-world examples."""
