"""Build 3D meshes from primitive shapes, then reshape them with transforms and plugins."""

__version__ = "0.1.0"