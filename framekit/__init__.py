"""A small 2D game framework on pygame: layered scenes, components, colliders, animation and a frame loop."""

__version__ = "0.1.0"