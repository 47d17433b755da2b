from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, fail, json_body, parse_location
from ..container import Container
from ..core.constants import ALL
from ..users.qr import parse_qr_payload


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/checkin", methods=["POST"], endpoint="api_checkin")
    @api_errors
    def api_checkin():
        data = json_body()
        user = store.get_user(str(data.get("userId", "")))
        if not user:
            return fail("User not found", 404)

        record = store.check_in(user, location=parse_location(data.get("location")))
        return jsonify({"success": True, "record": record.to_dict()}), 200

    @app.route("/api/checkout", methods=["POST"], endpoint="api_checkout")
    @api_errors
    def api_checkout():
        data = json_body()
        user_id = str(data.get("userId", ""))
        record_id = data.get("recordId")
        if not record_id:
            session = store.get_today_session(user_id)
            if not session:
                return fail("No active session found", 404)
            record_id = session.id

        record = store.check_out(user_id, str(record_id), location=parse_location(data.get("location")))
        if not record:
            return fail("Attendance record not found", 404)
        return jsonify({"success": True, "record": record.to_dict()}), 200

    @app.route("/api/checkin/qr", methods=["POST"], endpoint="api_checkin_qr")
    @api_errors
    def api_checkin_qr():
        """Check in or out depending on whether today's session is open."""
        data = json_body()
        qr_code = str(data.get("qr_code", "")).strip()
        if not qr_code:
            return fail("QR code must not be empty", 400)

        user_id = parse_qr_payload(qr_code)
        if not user_id:
            return fail("Unrecognized QR code", 400)

        action, record = store.toggle_session(user_id)
        if not record:
            return fail("User not found", 404)
        return jsonify({"success": True, "action": action, "record": record.to_dict()}), 200

    @app.route("/api/records", methods=["GET"], endpoint="api_records")
    @api_errors
    def api_records():
        rows = store.get_history(user_id=request.args.get("userId"), user_type=request.args.get("userType", ALL))
        return jsonify({"records": [r.to_dict() for r in rows]})

    @app.route("/api/records/<record_id>", methods=["DELETE"], endpoint="api_delete_record")
    @api_errors
    def api_delete_record(record_id: str):
        if not store.delete_record(record_id):
            return fail("Attendance record not found", 404)
        return jsonify({"success": True})

    @app.route("/api/users/<user_id>/history", methods=["GET"], endpoint="api_user_history")
    @api_errors
    def api_user_history(user_id: str):
        limit = request.args.get("limit", 15, type=int)
        return jsonify({"history": store.attendance.get_history_ui(user_id, limit=limit)})

    @app.route("/api/sessions/<user_id>/today", methods=["GET"], endpoint="api_today_session")
    @api_errors
    def api_today_session(user_id: str):
        session = store.get_today_session(user_id)
        return jsonify({"session": session.to_dict() if session else None})

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @api_errors
    def api_dashboard():
        return jsonify(store.attendance.dashboard_stats(user_type=request.args.get("userType", ALL)))

    @app.route("/api/settings", methods=["GET"], endpoint="api_settings")
    def api_settings():
        return jsonify(container.settings.to_dict())

    @app.route("/api/admin/clear", methods=["POST"], endpoint="api_clear_all")
    @api_errors
    def api_clear_all():
        store.clear_all()
        return jsonify({"success": True, "users": [u.to_dict() for u in store.get_users()]})
