"""
Text normalization and amount handling.
Extracts the first money amount from free text and formats amounts for replies.
"""
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional, Union

from core.logger import setup_logger
from core.schema import CENTS, MAX_AMOUNT

logger = setup_logger(__name__)

# Optional currency symbol, digits (plain or with thousands separators) and an
# optional one- or two-digit fraction. A number with a longer fraction is
# rejected as a whole instead of being truncated.
AMOUNT_PATTERN = re.compile(
    r"(?<![\d.])(?<!\d,)[$€£]?\s*(\d{1,3}(?:,\d{3})+|\d+)(\.\d{1,2})?(?!\.?\d)"
)


def normalize_text(text: Any) -> str:
    """
    Normalize text for keyword matching: lowercase, trim, collapse spaces.

    Args:
        text: Input text

    Returns:
        Normalized string ("" for non-string input)
    """
    if not text or not isinstance(text, str):
        return ""

    return " ".join(text.lower().strip().split())


def extract_amount(text: Optional[str]) -> Optional[Decimal]:
    """
    Extract the first valid money amount from free text.

    Examples:
        "Spent $45.50 on lunch" -> Decimal("45.50")
        "paid 1,250 rent" -> Decimal("1250.00")
        "45.555" -> None

    Args:
        text: Raw or normalized message text

    Returns:
        Amount quantized to cents, or None if no amount is present
        or the amount exceeds MAX_AMOUNT
    """
    if not text or not isinstance(text, str):
        return None

    match = AMOUNT_PATTERN.search(text)
    if not match:
        return None

    whole, fraction = match.group(1), match.group(2) or ""
    raw = whole.replace(",", "") + fraction

    try:
        amount = Decimal(raw)
        if amount > MAX_AMOUNT:
            logger.warning(f"Amount out of range: '{match.group(0).strip()}'")
            return None
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        logger.warning(f"Failed to parse amount: '{match.group(0)}' -> {e}")
        return None

    logger.debug(f"Extracted amount {amount} from '{match.group(0).strip()}'")
    return amount


def format_currency(amount: Union[Decimal, int, float], symbol: str = "$") -> str:
    """
    Format an amount the way the chat replies show it, e.g. "$1,234.50".

    Args:
        amount: Amount to format (negative values get a leading minus)
        symbol: Currency symbol

    Returns:
        Formatted string
    """
    value = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
