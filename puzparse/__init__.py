"""Parse .puz crossword puzzle files into structured data, with a JSON command line tool."""

__version__ = "0.1.0"