"""Day planning backend with interruption-aware rescheduling."""

__version__ = "0.1.0"
