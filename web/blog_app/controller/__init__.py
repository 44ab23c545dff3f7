"""Controller package - HTTP route handlers"""
from flask import request


def json_body() -> dict:
    """Request JSON as a dict; anything else (absent, malformed, array, scalar) is empty"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data
