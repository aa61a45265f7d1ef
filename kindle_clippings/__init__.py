"""Parse Kindle 'My Clippings.txt' exports into structured entries."""

__version__ = "0.1.0"
