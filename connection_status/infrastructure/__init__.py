"""Infrastructure layer: network adapters, metrics and logging."""
