"""Promo code domain exceptions."""

from __future__ import annotations


class PromoCodeAlreadyExists(Exception):
    """A promo code with the same ``code`` already exists."""
