# utils/xml_loader.py
import xml.etree.ElementTree as ET
from typing import Any, Dict
from pathlib import Path

# Fields whose XML text must come back as a specific type
INT_FIELDS = ("target_year",)
FLOAT_FIELDS = ("target_amount", "current_wealth", "monthly_contribution", "inflation_rate")
TEXT_FIELDS = ("risk_profile", "scenario")


def parse_goal_xml(file_path) -> Dict[str, Any]:
    """Load a goal setup (<goal> with one child per input field) into a flat dict."""
    tree = ET.parse(file_path)
    root = tree.getroot()

    goal_dict: Dict[str, Any] = {}

    for child in root:
        val = try_cast(child.text)
        if child.tag in INT_FIELDS:
            val = int(val) if val is not None else val
        if child.tag in FLOAT_FIELDS:
            val = float(val) if val is not None else val
        # Normalize enum selections
        if child.tag in TEXT_FIELDS and isinstance(val, str):
            val = val.strip().lower()
        goal_dict[child.tag] = val

    return goal_dict


def try_cast(value: str) -> Any:
    """Try to convert string to bool, int or float if possible, else leave as str."""
    if value is None:
        return None
    value = value.strip()
    # Booleans
    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    # Integers (try first)
    try:
        if '.' not in value:
            return int(value)
    except ValueError:
        pass

    # Floats (try second)
    try:
        return float(value)
    except ValueError:
        pass

    return value # Return as string if all else fails


CONFIG_DIR = Path(__file__).parent.parent / "config"

DEFAULT_GOAL = parse_goal_xml(CONFIG_DIR / "default_goal.xml")
