"""Indexed triangle meshes, ASCII PLY reading, revolution surfaces and a viewer scene model."""

__version__ = "0.1.0"
__all__ = ["tuples", "ply", "mesh", "axes", "scene"]