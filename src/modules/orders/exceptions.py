"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
the JSON envelope with the matching HTTP status.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""


class DuplicateOrderReference(Exception):
    """An order with the same ``order_reference`` already exists."""


class InvalidOrderStatus(Exception):
    """The value is not one of the eight order statuses."""

