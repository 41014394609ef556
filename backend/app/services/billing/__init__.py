"""Municipal Draft Engine - House Tax Billing

Pure bill arithmetic and Hindi amount-in-words, independent of rendering.
"""
from .house_tax import (
    DEFAULT_INTEREST_RATE,
    HOUSE_TAX_RATE,
    WATER_TAX_RATE,
    compute_house_tax_bill,
)
from .words import amount_in_hindi_words, integer_in_hindi_words

__all__ = [
    "compute_house_tax_bill",
    "amount_in_hindi_words",
    "integer_in_hindi_words",
    "HOUSE_TAX_RATE",
    "WATER_TAX_RATE",
    "DEFAULT_INTEREST_RATE",
]
