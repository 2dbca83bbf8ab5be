# fitrealm/validation.py
from typing import Any, Dict, List, Optional

from flask import request

from .errors import InvalidRequest

# signed 32-bit INTEGER, the narrowest integer column the stores use
MAX_INT = 2**31 - 1


def json_body() -> Dict[str, Any]:
    """Request body as a dict; an absent body is treated as empty."""
    if not request.get_data():
        return {}
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("request body must be a JSON object")
    return data


def _is_int(value: Any) -> bool:
    # bool is an int subclass; true/false are not counts
    return isinstance(value, int) and not isinstance(value, bool)


def non_negative_int(data: Dict[str, Any], key: str, default: Optional[int] = 0) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return default
    if not _is_int(value) or value < 0:
        raise InvalidRequest(f"{key} must be a non-negative integer")
    if value > MAX_INT:
        raise InvalidRequest(f"{key} must be at most {MAX_INT}")
    return value


def positive_int(data: Dict[str, Any], key: str, default: Optional[int] = None) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return default
    if not _is_int(value) or value < 1:
        raise InvalidRequest(f"{key} must be a positive integer")
    if value > MAX_INT:
        raise InvalidRequest(f"{key} must be at most {MAX_INT}")
    return value


def optional_text(data: Dict[str, Any], key: str, max_length: int = 255) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidRequest(f"{key} must be a string")
    value = value.strip()
    if len(value) > max_length:
        raise InvalidRequest(f"{key} must be at most {max_length} characters")
    return value or None


def required_text(data: Dict[str, Any], key: str, max_length: int = 255) -> str:
    value = optional_text(data, key, max_length=max_length)
    if not value:
        raise InvalidRequest(f"{key} is required")
    return value


def positive_int_list(data: Dict[str, Any], key: str) -> Optional[List[int]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(_is_int(v) and 1 <= v <= MAX_INT for v in value):
        raise InvalidRequest(f"{key} must be a list of positive integers")
    return value
