"""Configuration: environment settings and logging."""
