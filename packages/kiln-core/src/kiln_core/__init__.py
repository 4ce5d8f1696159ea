"""Health checks for projects scaffolded from the kiln deployment template."""

__version__ = "0.1.0"
