"""Procedural road-network generation guided by Perlin population noise."""

__version__ = "0.1.0"
__all__ = ["__version__"]