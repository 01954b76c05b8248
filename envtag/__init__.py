"""Environment-tagged git version tags."""

__version__ = "0.1.0"
