from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..attendance.model import dataset_to_json
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def _error(message: str, status: int, **extra):
    body = {"success": False, "error": message}
    body.update(extra)
    return jsonify(body), status


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        try:
            dataset = container.attendance_service.list_semesters()
            return jsonify(dataset_to_json(dataset)), 200
        except Exception as e:
            logger.exception("Error reading attendance data")
            return _error("Failed to read attendance data", 500, details=str(e))

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_upsert")
    def attendance_upsert():
        data = _json_body()
        missing = [name for name in ("semester", "records") if data.get(name) in (None, "")]
        if missing:
            return _error(f"Invalid data format. Missing required field(s): {', '.join(missing)}", 400)

        try:
            result = container.attendance_service.upsert_semester(data["semester"], data["records"])
            return jsonify({
                "success": True,
                "message": result.message,
                "data": result.semester.to_dict(),
            }), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception as e:
            logger.exception("Error writing attendance data")
            return _error("Failed to save attendance data", 500, details=str(e))

    @app.route("/api/attendance", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete():
        data = _json_body()
        semester = data.get("semester") or request.args.get("semester")
        paper_code = data.get("paperCode") or request.args.get("paperCode")
        if not semester:
            return _error("Semester is required", 400)

        try:
            result = container.attendance_service.delete(semester, paper_code)
            return jsonify({"success": True, "message": result.message}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except Exception as e:
            logger.exception("Error deleting attendance data")
            return _error("Failed to delete attendance data", 500, details=str(e))
