"""Infrastructure layer: logging and file persistence."""
