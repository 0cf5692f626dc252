"""Loading .fdf height maps and rendering them as wireframes into in-memory images."""

__version__ = "0.1.0"