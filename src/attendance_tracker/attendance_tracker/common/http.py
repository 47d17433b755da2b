from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Mapping, Optional

from flask import jsonify, request

from ..attendance.model import GeoPoint
from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> Mapping[str, Any]:
    return request.get_json(silent=True) or {}


def parse_location(data: Optional[Mapping[str, Any]]) -> Optional[GeoPoint]:
    if not data:
        return None
    try:
        return GeoPoint(lat=float(data["lat"]), lng=float(data["lng"]))
    except (KeyError, TypeError, ValueError):
        raise ValidationError("Location must have numeric lat and lng")


def date_arg(name: str):
    value = request.args.get(name)
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM-DD")


def api_errors(view):
    """Map expected failures to JSON responses."""
    log = logging.getLogger(view.__module__)

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            log.exception("Unhandled error in %s", view.__name__)
            return fail("Internal error", 500)

    return wrapper
