"""Fate Seekers client helpers: assets, localisation, logging, text queues and dialogs."""

__version__ = "0.1.0"