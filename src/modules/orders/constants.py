"""Order domain constants.

Status choices for the manual-contact checkout workflow and the fixed
values written into contact history.  Any status may move to any other
status; only the value itself is checked.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING_CONTACT = "pending_contact", "Pending contact"
    CONTACTED = "contacted", "Contacted"
    CONFIRMED = "confirmed", "Confirmed"
    PREPARING = "preparing", "Preparing"
    READY_FOR_SHIPPING = "ready_for_shipping", "Ready for shipping"
    SHIPPED = "shipped", "Shipped"
    DELIVERED = "delivered", "Delivered"
    CANCELLED = "cancelled", "Cancelled"


class OrderType(models.TextChoices):
    MANUAL_PAYMENT = "manual_payment", "Manual payment"
    ONLINE_PAYMENT = "online_payment", "Online payment"


class ContactMethod(models.TextChoices):
    EMAIL = "email", "Email"
    PHONE = "phone", "Phone"
    WHATSAPP = "whatsapp", "WhatsApp"


DEFAULT_COUNTRY = "Canada"
NOT_SPECIFIED = "Not specified"

CONTACT_ADMIN_USER = "Admin"
INITIAL_CONTACT_NOTE = "Initial contact made with customer"

RECENT_ORDERS_LIMIT = 5
