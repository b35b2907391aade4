"""
Shared regular expressions for price tokens, measurements and spec lines.
"""

import re

CURRENCY_SYMBOLS = "$€£¥"

# A currency-tagged amount, symbol before or after the number
PRICE_TOKEN = re.compile(
    r"[$€£¥]\s*\d[\d.,]*(?<![.,])"
    r"|\d[\d.,]*(?<![.,])\s*[$€£¥]"
)

# A line that is nothing but a price
PRICE_ONLY = re.compile(r"^\s*(?:[$€£¥]\s*[\d.,]+|[\d.,]+\s*[$€£¥])\s*$")

# A line starting with a measurement such as 25.5" or 648'
MEASUREMENT_LINE = re.compile(r"^\d+[.\d]*\s*[\"']")


def is_price_only(text: str) -> bool:
    return bool(PRICE_ONLY.match(text))


def is_measurement_line(text: str) -> bool:
    return bool(MEASUREMENT_LINE.match(text))


def is_spec_line(text: str, max_line_chars: int = 150, max_key_chars: int = 30) -> bool:
    """
    Whether text looks like a short "Key: Value" specification line.

    Exactly one colon, a key shorter than max_key_chars, and the whole
    line shorter than max_line_chars.
    """
    if ":" not in text or len(text) >= max_line_chars:
        return False
    parts = text.split(":")
    return len(parts) == 2 and len(parts[0].strip()) < max_key_chars
