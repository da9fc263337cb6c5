"""Behavioral patterns: how objects share responsibilities and talk to each other."""
