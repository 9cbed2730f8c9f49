"""Product domain exceptions.

Raised by the Service Layer; the views translate them into the
JSON envelope.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested listing does not exist."""
