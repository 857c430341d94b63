"""Cross-cutting concerns: logging and request trace context."""
