"""Template Method pattern: conceptual and real-world examples."""
