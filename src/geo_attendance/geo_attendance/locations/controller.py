from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_body
from ..core.exceptions import OfficeNotConfiguredError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/user/get-office-location", methods=["GET"], endpoint="get_office_location")
    def get_office_location():
        try:
            office = container.office_service.get_office()
            return jsonify(office.to_dict()), 200
        except OfficeNotConfiguredError:
            return jsonify({"error": "Office location not found"}), 404
        except Exception as e:
            return error_response(e, fallback="Failed to fetch office location")

    @app.route("/user/set-office-location", methods=["POST"], endpoint="set_office_location")
    def set_office_location():
        data = json_body()
        try:
            if not data.get("locationName") or any(data.get(k) is None for k in ("latitude", "longitude", "radius")):
                raise ValidationError("locationName, latitude, longitude, and radius are required")
            office = container.office_service.set_office(
                name=data["locationName"],
                latitude=data["latitude"],
                longitude=data["longitude"],
                radius=data["radius"],
            )
            return jsonify({"success": True, **office.to_dict()}), 200
        except Exception as e:
            return error_response(e, fallback="Failed to set office location")
