from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, date_arg
from ..container import Container
from ..core.constants import ALL, DEFAULT_ANALYTICS_WINDOW


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _build_report():
        return reports.build_report(
            report_type=request.args.get("type", "monthly"),
            reference_date=date_arg("date"),
            department=request.args.get("department", ALL),
            start=date_arg("start"),
            end=date_arg("end"),
        )

    @app.route("/api/reports", methods=["GET"], endpoint="api_report")
    @api_errors
    def api_report():
        report = _build_report()
        return jsonify(
            {
                "dateRange": report.date_range.to_dict(),
                "department": report.department,
                "departments": reports.departments(),
                "summary": report.summary,
                "records": [r.to_dict() for r in report.records],
            }
        )

    def _export(fmt: str):
        report = _build_report()
        exporter = reports.exporter(fmt)
        body = exporter.render(report).encode("utf-8")
        return app.response_class(
            body,
            mimetype=exporter.media_type,
            headers={"Content-Disposition": f"attachment; filename={exporter.filename(report)}"},
        )

    @app.route("/api/reports.csv", methods=["GET"], endpoint="api_report_csv")
    @api_errors
    def api_report_csv():
        return _export("csv")

    @app.route("/api/reports.json", methods=["GET"], endpoint="api_report_json")
    @api_errors
    def api_report_json():
        return _export("json")

    @app.route("/api/reports.html", methods=["GET"], endpoint="api_report_html")
    @api_errors
    def api_report_html():
        report = _build_report()
        return app.response_class(reports.export(report, "html"), mimetype="text/html")

    @app.route("/api/analytics", methods=["GET"], endpoint="api_analytics")
    @api_errors
    def api_analytics():
        range_key = request.args.get("range", DEFAULT_ANALYTICS_WINDOW)
        return jsonify(reports.analytics(range_key=range_key).to_dict())
