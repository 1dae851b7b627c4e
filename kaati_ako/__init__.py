"""
Kaati Ako - learn another language by flash cards.

'kaati ako' means 'flash card' in Tongan. This package holds the data layer:
the SQLite schema, a small record mapper and the four entities built on it.
"""

__version__ = "0.1.0"
