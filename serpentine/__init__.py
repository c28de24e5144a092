"""A grid-based snake arcade game built on pygame, with headless game logic."""

__version__ = "0.1.0"