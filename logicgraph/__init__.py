"""Reactive logical entities, components, behaviours, a plugin that registers them, and a deployment helper."""

__version__ = "0.8.0"