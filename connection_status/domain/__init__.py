"""Domain layer: socket model, probe outcomes and error types."""
