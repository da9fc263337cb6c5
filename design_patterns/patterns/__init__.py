"""Pattern examples, grouped by category."""
