"""
contact-book: a console contact manager backed by a flat text file.
"""

__version__ = "1.0.0"
