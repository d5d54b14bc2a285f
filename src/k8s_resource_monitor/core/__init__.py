"""Core resource presentation pipeline."""
