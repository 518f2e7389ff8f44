"""Student registration service for cultural events."""

__version__ = "0.1.0"
