"""
House Tax Computation

The arithmetic behind a house tax bill, kept apart from rendering:

    house tax  = 10% of annual rental valuation (ARV)
    water tax  = 2.5% of ARV
    interest   = arrears x rate / 100
    total      = house tax + water tax + arrears + interest

Each figure is rounded to two decimals (half up) before summing.
"""
from __future__ import annotations
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from app.models.draft import BillDetails
from .words import amount_in_hindi_words

logger = logging.getLogger(__name__)

HOUSE_TAX_RATE = Decimal("0.10")
WATER_TAX_RATE = Decimal("0.025")
DEFAULT_INTEREST_RATE = Decimal("12")

_CENT = Decimal("0.01")

Number = Union[int, float, Decimal, str]


def _money(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def _non_negative(name: str, value: Number) -> Decimal:
    try:
        number = Decimal(str(value))
    except ArithmeticError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not number.is_finite() or number < 0:
        raise ValueError(f"{name} must be a non-negative number, got {value!r}")
    return number


def compute_house_tax_bill(
    taxpayer_name: str,
    parent_or_spouse_name: str,
    house_number: str,
    locality: str,
    ward_number: str,
    annual_valuation: Number,
    arrears: Number = 0,
    interest_rate: Number = DEFAULT_INTEREST_RATE,
    description: str = "",
) -> BillDetails:
    """
    Compute every derived bill figure.

    Raises:
        ValueError: valuation, arrears or rate is negative or not a number
    """
    arv = _non_negative("annual_valuation", annual_valuation)
    arrears_amount = _non_negative("arrears", arrears)
    rate = _non_negative("interest_rate", interest_rate)

    house_tax = _money(arv * HOUSE_TAX_RATE)
    water_tax = _money(arv * WATER_TAX_RATE)
    interest = _money(arrears_amount * rate / Decimal(100))
    total = _money(house_tax + water_tax + _money(arrears_amount) + interest)

    logger.info(f"Computed house tax bill for house {house_number}: total={total}")

    return BillDetails(
        taxpayer_name=taxpayer_name,
        parent_or_spouse_name=parent_or_spouse_name,
        house_number=house_number,
        locality=locality,
        ward_number=ward_number,
        annual_valuation=float(_money(arv)),
        arrears=float(_money(arrears_amount)),
        interest_rate=float(rate),
        house_tax=float(house_tax),
        water_tax=float(water_tax),
        interest=float(interest),
        total_amount=float(total),
        total_in_words=amount_in_hindi_words(total),
        description=description,
    )
