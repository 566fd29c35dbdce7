"""
Domain Exceptions
"""


class ExtractionError(Exception):
    """Raised when a PDF byte stream cannot be turned into text"""
