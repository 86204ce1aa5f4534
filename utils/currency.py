# utils/currency.py
import math
from typing import Union

CURRENCY_SYMBOL = "₹"

# ----------------------------------------------------------------------
# Helper Function
# ----------------------------------------------------------------------

def clean_currency(val):
    """
    Cleans a currency string (e.g., "₹25,00,000" or "$140,000.00") into a float.
    Unparseable input comes back as 0.0.
    """
    if val is None or val == "":
        return 0.0

    if isinstance(val, (int, float)):
        return float(val)

    cleaned_val = str(val).replace(CURRENCY_SYMBOL, '').replace('$', '').replace(',', '').strip()
    if not cleaned_val:
        return 0.0
    try:
        return float(cleaned_val)
    except ValueError:
        return 0.0


def _group_indian(digits: str) -> str:
    """'12345678' -> '1,23,45,678' (lakh/crore grouping)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency_output(val, decimals=0):
    """
    Formats a number as Indian rupees (₹1,23,45,678), halves rounded away from zero.

    Args:
        val (float): The numerical value to format.
        decimals (int): Number of decimal places.
    """
    if val is None:
        val = 0.0
    val = float(val)
    if math.isnan(val):
        return "—"

    scale = 10 ** decimals
    magnitude = math.floor(abs(val) * scale + 0.5)
    whole, frac = divmod(magnitude, scale)

    text = CURRENCY_SYMBOL + _group_indian(str(int(whole)))
    if decimals > 0:
        text += "." + str(int(frac)).zfill(decimals)

    sign = "-" if val < 0 and magnitude > 0 else ""
    return sign + text


def clean_percent(raw_input: Union[str, float, int]) -> Union[float, None]:
    """
    Cleans raw input (e.g., '6', '6%', ' 6.5 % ') into a percent number (6.0).
    Unlike a fraction, 6 means 6% per year.
    """
    if raw_input is None:
        return None

    if isinstance(raw_input, (float, int)):
        return float(raw_input)

    s = str(raw_input).replace('%', '').replace(',', '').replace(' ', '').strip()
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None # Return None for unparseable input


def format_percent_output(value: Union[float, None], decimal_places: int = 1) -> str:
    """Formats a percent number (61.25) to a display string ('61.3%')."""
    if value is None:
        return ""
    return f"{float(value):.{decimal_places}f}%"
