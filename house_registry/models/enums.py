"""Enumeration types for house records."""

from enum import Enum


class ChangeType(str, Enum):
    CREATION = "Creation"
    UPDATE = "Update"
    PURCHASE = "Purchase"
    DELETION = "Deletion"
    AVAILABILITY_CHANGE = "AvailabilityChange"
    PRICE_CHANGE = "PriceChange"
