"""NoteShare - multi-user notes API with sharing and search."""

__version__ = "1.0.0"
