"""Infrastructure: logging, example registry and example runner."""
