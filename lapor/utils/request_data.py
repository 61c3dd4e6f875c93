"""
Helpers for reading request bodies

The front end sends JSON for some endpoints and multipart forms for others,
and older clients use the Indonesian field names (nama, nik, no_hp, ...).
"""

from flask import request


def request_data():
    """JSON body if there is one, else the submitted form"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def get_field(data, *names, strip=True):
    """First non-None value among the given aliases"""
    for name in names:
        value = data.get(name)
        if value is not None:
            if strip and isinstance(value, str):
                return value.strip()
            return value
    return None


def parse_int(value):
    """int(value), or None when value is missing or not an integer"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def as_text(value):
    """str(value) for JSON numbers and the like; None stays None"""
    if value is None or isinstance(value, str):
        return value
    return str(value)
