from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_body
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/notifications", methods=["GET"], endpoint="notifications")
    def notifications():
        try:
            items = container.notification_service.list_all()
            return jsonify([n.to_dict() for n in items]), 200
        except Exception as e:
            return error_response(e, fallback="Failed to fetch notifications")

    @app.route("/admin/add-notification", methods=["POST"], endpoint="add_notification")
    def add_notification():
        data = json_body()
        try:
            if not data.get("title") or not data.get("message"):
                raise ValidationError("title and message are required")
            created = container.notification_service.add(title=data["title"], message=data["message"])
            return jsonify({"success": True, **created.to_dict()}), 201
        except Exception as e:
            return error_response(e, fallback="Failed to add notification")

    @app.route("/admin/delete-notification", methods=["DELETE"], endpoint="delete_notification")
    def delete_notification():
        data = json_body()
        try:
            if not data.get("notificationId"):
                raise ValidationError("notificationId is required")
            deleted = container.notification_service.delete(data["notificationId"])
            return jsonify({"success": True, "deletedNotification": deleted.to_dict()}), 200
        except Exception as e:
            return error_response(e, fallback="Failed to delete notification")
