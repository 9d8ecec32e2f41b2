"""Reactive shared state, persistence keys, watch channels and typed mutation steps."""

__version__ = "0.1.0"