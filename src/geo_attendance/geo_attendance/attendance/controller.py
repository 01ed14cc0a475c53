from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_body
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _require_position(data: dict) -> None:
        if not data.get("userId") or data.get("userLatitude") is None or data.get("userLongitude") is None:
            raise ValidationError("userId, userLatitude and userLongitude are required")

    @app.route("/user/check-in", methods=["POST"], endpoint="checkin")
    def checkin():
        data = json_body()
        try:
            _require_position(data)
            receipt = container.attendance_service.check_in(
                data["userId"], data["userLatitude"], data["userLongitude"], data.get("notes")
            )
            return jsonify({"message": "Check-in recorded", **receipt.to_dict()}), 201
        except Exception as e:
            return error_response(e, fallback="Check-in failed")

    @app.route("/user/check-out", methods=["POST"], endpoint="checkout")
    def checkout():
        data = json_body()
        try:
            _require_position(data)
            receipt = container.attendance_service.check_out(
                data["userId"], data["userLatitude"], data["userLongitude"], data.get("notes")
            )
            return jsonify({"message": "Checkout recorded", **receipt.to_dict()}), 201
        except Exception as e:
            return error_response(e, fallback="Checkout failed")

    @app.route("/admin/get-attendance", methods=["GET"], endpoint="admin_attendance")
    def admin_attendance():
        try:
            rows = container.attendance_service.list_all()
            return jsonify([r.to_dict() for r in rows]), 200
        except Exception as e:
            return error_response(e, fallback="Failed to fetch attendance")

    @app.route("/admin/get-attendance-user", methods=["POST"], endpoint="admin_attendance_user")
    def admin_attendance_user():
        data = json_body()
        try:
            if not data.get("userId"):
                raise ValidationError("userId is required")
            rows = container.attendance_service.list_for_user(data["userId"])
            return jsonify([r.to_dict() for r in rows]), 200
        except Exception as e:
            return error_response(e, fallback="Failed to fetch attendance")
