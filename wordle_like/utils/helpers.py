"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional

from flask import request

from ..errors import InvalidInputError


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'user_agent': str(getattr(request_obj, 'user_agent', '') or '') or None,
    }


def get_json_body(request_obj=None) -> Dict[str, Any]:
    """Return the JSON object body of a request, or an empty dict when there is none."""
    if request_obj is None:
        request_obj = request

    data = request_obj.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return data


def optional_int(data: Dict[str, Any], key: str) -> Optional[int]:
    """Read an optional integer field from a request body."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"'{key}' must be an integer")
    return value
