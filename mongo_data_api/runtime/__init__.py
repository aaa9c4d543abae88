"""Runtime layer: HTTP transport and action execution."""
