"""Bodega point-of-sale core: domain entities, repository ports and use cases."""

__version__ = "1.0.0"
