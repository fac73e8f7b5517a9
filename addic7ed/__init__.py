"""Search, filter, score and download TV show subtitles from the Addic7ed website."""

__version__ = "0.1.0"
__all__ = ["client", "filters", "similarity", "subtitles"]