"""Text-driven choose-your-own-adventure engine."""

__version__ = "0.1.0"
