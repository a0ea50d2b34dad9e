"""Process-wide constants for the Veryfi partner API."""

from __future__ import annotations

from typing import FrozenSet, Tuple

BASE_URL = "https://api.veryfi.com/api/"
API_VERSION = "v7"
API_TIMEOUT = 120.0
MAX_FILE_SIZE_MB = 20

USER_AGENT = "Python Veryfi-Python/0.1"

TIMESTAMP_HEADER = "X-Veryfi-Request-Timestamp"
SIGNATURE_HEADER = "X-Veryfi-Request-Signature"

SUCCESS_STATUSES: FrozenSet[int] = frozenset({200, 201, 202, 204})

CATEGORIES: Tuple[str, ...] = (
    "Advertising & Marketing",
    "Automotive",
    "Bank Charges & Fees",
    "Legal & Professional Services",
    "Insurance",
    "Meals & Entertainment",
    "Office Supplies & Software",
    "Taxes & Licenses",
    "Travel",
    "Rent & Lease",
    "Repairs & Maintenance",
    "Payroll",
    "Utilities",
    "Job Supplies",
    "Grocery",
)


__all__ = [
    "BASE_URL",
    "API_VERSION",
    "API_TIMEOUT",
    "MAX_FILE_SIZE_MB",
    "USER_AGENT",
    "TIMESTAMP_HEADER",
    "SIGNATURE_HEADER",
    "SUCCESS_STATUSES",
    "CATEGORIES",
]
