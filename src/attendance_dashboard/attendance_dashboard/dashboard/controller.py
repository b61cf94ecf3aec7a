from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        """Aggregate figures for the viewer cards and charts."""
        try:
            dataset = container.attendance_service.list_semesters()
            summary = container.dashboard_service.build_summary(dataset)
            return jsonify(summary.to_dict()), 200
        except Exception as e:
            logger.exception("Error building attendance summary")
            return jsonify({"success": False, "error": "Failed to build attendance summary", "details": str(e)}), 500
