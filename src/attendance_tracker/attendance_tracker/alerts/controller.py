from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, date_arg, fail, json_body
from ..container import Container
from ..core.constants import ALL


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/alerts", methods=["GET"], endpoint="api_alerts")
    @api_errors
    def api_alerts():
        user_id = request.args.get("userId")
        alerts = store.get_alerts(user_id, request.args.get("type", ALL))
        return jsonify(
            {
                "alerts": [a.to_dict() for a in alerts],
                "unread": store.alerts.unread_count(user_id),
                "counts": store.alerts.type_counts(),
            }
        )

    @app.route("/api/alerts/<alert_id>/read", methods=["POST"], endpoint="api_alert_read")
    @api_errors
    def api_alert_read(alert_id: str):
        return jsonify({"success": True, "changed": store.mark_alert_read(alert_id)})

    @app.route("/api/alerts/read-all", methods=["POST"], endpoint="api_alerts_read_all")
    @api_errors
    def api_alerts_read_all():
        user_id = json_body().get("userId")
        return jsonify({"success": True, "changed": store.mark_all_alerts_read(user_id)})

    @app.route("/api/alerts/absences", methods=["POST"], endpoint="api_absence_scan")
    @api_errors
    def api_absence_scan():
        created = store.generate_absence_alerts(today=date_arg("date"))
        return jsonify({"success": True, "created": [a.to_dict() for a in created]})
