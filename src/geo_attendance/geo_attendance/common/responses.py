from __future__ import annotations

import logging

from flask import jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DeliveryError,
    NotFoundError,
    OfficeNotConfiguredError,
    OutsideAllowedAreaError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(exc: Exception, *, fallback: str, not_found_status: int = 404):
    """Translate a service exception into a JSON error and HTTP status.

    Caller-fixable and business-rule errors carry their own message;
    infrastructure faults get the generic `fallback` and are logged here.
    """

    if isinstance(exc, ValidationError):
        return jsonify({"error": str(exc)}), 400
    if isinstance(exc, NotFoundError):
        return jsonify({"error": str(exc)}), not_found_status
    if isinstance(exc, AuthenticationError):
        return jsonify({"error": str(exc)}), 401
    if isinstance(exc, OutsideAllowedAreaError):
        return jsonify({"error": str(exc), "distance": round(exc.distance_m, 1), "radius": exc.radius_m}), 403
    if isinstance(exc, OfficeNotConfiguredError):
        logger.error("%s", exc)
        return jsonify({"error": "Office location not configured"}), 503
    if isinstance(exc, DeliveryError):
        logger.error("%s: email delivery failed: %s", fallback, exc)
        return jsonify({"error": fallback}), 502
    if isinstance(exc, ConfigurationError):
        logger.error("%s: configuration error: %s", fallback, exc)
        return jsonify({"error": fallback}), 500

    logger.exception("%s", fallback, exc_info=exc)
    return jsonify({"error": fallback}), 500


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
