"""Custom field meta boxes for Django models."""

__version__ = "2.1.0"

__all__ = ["__version__"]
