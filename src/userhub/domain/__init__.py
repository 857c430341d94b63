"""Domain layer: error taxonomy and value objects."""
