"""Cameras, entities, components, scenes, character movement and terrain for a small 3D game engine."""

__version__ = "0.1.0"