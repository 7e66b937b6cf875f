"""A small OpenGL scene viewer with a fly camera and hot-reloadable shaders."""

__version__ = "0.1.0"