"""Constants and wire models for the Conversion API.

Response models live in ``calc_api.models.responses``; they depend on the
service result types and are imported from there directly.
"""

from .constants import (
    SUPPORTED_CURRENCIES,
    STANDARD_TVA_RATES,
    AVAILABLE_ENDPOINTS,
    ENDPOINT_EXAMPLES,
)  # re-export

__all__ = [
    "SUPPORTED_CURRENCIES",
    "STANDARD_TVA_RATES",
    "AVAILABLE_ENDPOINTS",
    "ENDPOINT_EXAMPLES",
]
