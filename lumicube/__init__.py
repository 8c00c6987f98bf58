"""A lit cube scene with a free-flying camera, rendered with OpenGL through pyglet."""

__version__ = "0.1.0"