"""Gallery API: uploaded images with per-image comments."""

__version__ = "0.1.0"
