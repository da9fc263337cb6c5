"""Chain Of Responsibility pattern: conceptual and real-world examples."""
