"""tagsort - move audio files into folders named after their tags."""

__version__ = "0.1.0"

__all__ = ["__version__"]
