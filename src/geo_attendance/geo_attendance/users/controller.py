from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import error_response, json_body
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/user/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            user = container.auth_service.login(data.get("email") or "", data.get("password") or "")
            return jsonify({"message": "Login successful, 2FA code sent", "userId": user.user_id, "email": user.email}), 200
        except Exception as e:
            # Unknown email is reported as a credential failure.
            return error_response(e, fallback="Login failed", not_found_status=401)

    @app.route("/user/verify-2fa", methods=["POST"], endpoint="verify_2fa")
    def verify_2fa():
        data = json_body()
        try:
            if not data.get("userId") or not data.get("code"):
                raise ValidationError("userId and code are required")
            user = container.two_factor_service.verify(data["userId"], str(data["code"]))
            return jsonify({"message": "2FA verified", "userId": user.user_id, "email": user.email}), 200
        except Exception as e:
            return error_response(e, fallback="2FA verification failed")

    @app.route("/user/resend-2fa", methods=["POST"], endpoint="resend_2fa")
    def resend_2fa():
        data = json_body()
        try:
            if not data.get("userId"):
                raise ValidationError("userId is required")
            user = container.two_factor_service.resend(data["userId"])
            return jsonify({"message": "2FA code resent", "userId": user.user_id, "email": user.email}), 200
        except Exception as e:
            return error_response(e, fallback="Failed to resend 2FA code")

    @app.route("/user/forget-password", methods=["POST"], endpoint="forget_password")
    def forget_password():
        data = json_body()
        try:
            user = container.auth_service.reset_password(
                user_id=data.get("userId"),
                email=data.get("email") or "",
                new_password=data.get("newPassword") or "",
            )
            return jsonify({"message": "Password updated successfully", "userId": user.user_id, "email": user.email}), 200
        except Exception as e:
            return error_response(e, fallback="Failed to reset password")

    @app.route("/admin/get-user-all", methods=["GET"], endpoint="admin_users")
    def admin_users():
        try:
            users = container.user_service.list_students()
            return jsonify([u.to_dict() for u in users]), 200
        except Exception as e:
            return error_response(e, fallback="Failed to fetch users")

    @app.route("/admin/add-user", methods=["POST"], endpoint="add_user")
    def add_user():
        data = json_body()
        try:
            if not data.get("name") or not data.get("usernameEmail") or not data.get("password"):
                raise ValidationError("name, usernameEmail, and password are required")
            user_id = container.user_service.create_user(
                user_id=data.get("userId"),
                name=data["name"],
                email=data["usernameEmail"],
                password=data["password"],
                role=data.get("role"),
                nim_nip=data.get("nimNip"),
            )
            return (
                jsonify(
                    {
                        "success": True,
                        "userId": user_id,
                        "name": data["name"],
                        "usernameEmail": data["usernameEmail"],
                        "role": data.get("role"),
                        "nimNip": data.get("nimNip"),
                    }
                ),
                201,
            )
        except Exception as e:
            return error_response(e, fallback="Failed to add user")

    @app.route("/admin/edit-user", methods=["PUT"], endpoint="edit_user")
    def edit_user():
        data = json_body()
        try:
            if not data.get("userId"):
                raise ValidationError("userId is required")
            container.user_service.edit_user(
                data["userId"],
                name=data.get("name"),
                email=data.get("usernameEmail"),
                password=data.get("password"),
                role=data.get("role"),
                nim_nip=data.get("nimNip"),
            )
            return jsonify({"success": True, "userId": data["userId"]}), 200
        except Exception as e:
            return error_response(e, fallback="Failed to edit user")

    @app.route("/admin/delete-user", methods=["DELETE"], endpoint="delete_user")
    def delete_user():
        data = json_body()
        try:
            if not data.get("userId"):
                raise ValidationError("userId is required")
            container.user_service.delete_user(data["userId"])
            return jsonify({"success": True, "deletedUserId": data["userId"]}), 200
        except Exception as e:
            return error_response(e, fallback="Failed to delete user")
