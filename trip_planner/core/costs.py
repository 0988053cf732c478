# core/costs.py

import re
from dataclasses import dataclass
from typing import Optional

# "IDR 50,000", "usd20", "EUR 1.250,50"
_CURRENCY_RE = re.compile(r"([A-Z]{2,3})\s*([\d,.]+)", re.IGNORECASE)
# Leading unsigned decimal, read the way a lenient float parser reads a prefix
_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


@dataclass(frozen=True)
class ParsedCost:
    value: float
    currency: Optional[str] = None


def _normalise_separators(numeric: str) -> str:
    comma = numeric.find(",")
    dot = numeric.find(".")

    if comma >= 0 and dot >= 0:
        # The first separator groups thousands, the other one marks decimals
        thousands, decimal = (",", ".") if comma < dot else (".", ",")
        return numeric.replace(thousands, "").replace(decimal, ".")
    if comma >= 0:
        # Lone comma is read as a decimal mark: "1,000" -> 1.0
        return numeric.replace(",", ".", 1)
    return numeric


def parse_cost(text: str) -> ParsedCost:
    """
    Turn a free-text cost fragment into a number and an optional currency.

    ``"Free"`` is 0, ``"IDR 50,000"`` is ``ParsedCost(50.0, "IDR")``,
    ``"1.000,00"`` is 1000.0. Anything unparseable is 0; this never raises.
    """
    text = (text or "").strip()
    if text.lower() == "free":
        return ParsedCost(0.0, None)

    currency = None
    numeric = text
    m = _CURRENCY_RE.search(text)
    if m:
        currency = m.group(1).upper()
        numeric = m.group(2)

    numeric = _normalise_separators(re.sub(r"\s", "", numeric))

    n = _NUMBER_RE.match(numeric)
    return ParsedCost(float(n.group(0)) if n else 0.0, currency)
