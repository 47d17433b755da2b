from __future__ import annotations

from flask import Flask, Response, jsonify

from ..common.http import api_errors, fail, json_body
from ..container import Container
from .qr import qr_payload, render_qr_png
from .roster import DEPARTMENTS


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/users", methods=["GET"], endpoint="api_users")
    @api_errors
    def api_users():
        return jsonify({"users": [u.to_dict() for u in store.get_users()], "departments": DEPARTMENTS})

    @app.route("/api/users", methods=["POST"], endpoint="api_create_user")
    @api_errors
    def api_create_user():
        data = json_body()
        user = store.create_user(
            name=data.get("name", ""),
            user_type=data.get("type", ""),
            department=data.get("department", ""),
            role=data.get("role"),
            email=data.get("email"),
            phone=data.get("phone"),
        )
        return jsonify({"success": True, "user": user.to_dict()}), 201

    @app.route("/api/users/import", methods=["POST"], endpoint="api_import_users")
    @api_errors
    def api_import_users():
        created = store.bulk_import(str(json_body().get("text", "")))
        return jsonify({"success": True, "imported": len(created), "users": [u.to_dict() for u in created]})

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="api_delete_user")
    @api_errors
    def api_delete_user(user_id: str):
        if not store.delete_user(user_id):
            return fail("User not found", 404)
        return jsonify({"success": True})

    @app.route("/api/users/<user_id>/qr.png", methods=["GET"], endpoint="api_user_qr")
    @api_errors
    def api_user_qr(user_id: str):
        """Badge image encoding ``USER:<id>`` for QR check-in."""
        if not store.get_user(user_id):
            return fail("User not found", 404)
        return Response(render_qr_png(qr_payload(user_id)), mimetype="image/png")
