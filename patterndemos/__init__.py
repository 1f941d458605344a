"""Runnable demonstrations of the Factory Method and Singleton design patterns."""

__version__ = "0.1.0"