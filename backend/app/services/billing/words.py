"""
Hindi amount-in-words for bills.

Indian grouping: करोड़ (10^7), लाख (10^5), हज़ार (10^3), सौ (10^2).
Hindi has a distinct word for every number below 100, so those come
from a table rather than tens + units.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Union

_UNDER_100 = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तैंतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पंचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
)

_SCALES = (
    (10_000_000, "करोड़"),
    (100_000, "लाख"),
    (1_000, "हज़ार"),
    (100, "सौ"),
)


def integer_in_hindi_words(number: int) -> str:
    """Spell a non-negative integer in Hindi (1810 -> 'एक हज़ार आठ सौ दस')."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number < 100:
        return _UNDER_100[number]

    words: List[str] = []
    remainder = number
    for value, name in _SCALES:
        if remainder >= value:
            count, remainder = divmod(remainder, value)
            # Counts of crore can themselves exceed 99
            words.append(integer_in_hindi_words(count))
            words.append(name)
    if remainder:
        words.append(_UNDER_100[remainder])
    return " ".join(words)


def amount_in_hindi_words(amount: Union[int, float, Decimal]) -> str:
    """
    Rupee amount in words, as printed on bills.

    1810     -> 'एक हज़ार आठ सौ दस रुपये मात्र'
    1810.50  -> 'एक हज़ार आठ सौ दस रुपये पचास पैसे मात्र'
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if value < 0:
        raise ValueError("amount must be non-negative")
    rupees = int(value)
    paise = int((value - rupees) * 100)

    text = f"{integer_in_hindi_words(rupees)} रुपये"
    if paise:
        text += f" {integer_in_hindi_words(paise)} पैसे"
    return f"{text} मात्र"
