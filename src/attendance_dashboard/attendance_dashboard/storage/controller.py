from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import StorageError
from .selector import read_order, write_order

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    settings = container.storage_settings

    @app.route("/api/attendance/status", methods=["GET"], endpoint="storage_status")
    def storage_status():
        """Report which backends are configured; never touches the data."""
        return jsonify({
            "supabaseConfigured": settings.database_configured,
            "hasUrl": bool(settings.supabase_url),
            "hasKey": bool(settings.supabase_key),
            "urlLength": len(settings.supabase_url),
            "keyLength": len(settings.supabase_key),
            "serverless": settings.serverless,
            "readOrder": [k.value for k in read_order(settings)],
            "writeOrder": [k.value for k in write_order(settings)],
        }), 200

    @app.route("/api/attendance/test", methods=["GET"], endpoint="storage_test")
    def storage_test():
        """Try one read against the managed database."""
        backend = container.database_backend
        if backend is None:
            return jsonify({
                "configured": False,
                "error": "Supabase is not configured. Please set SUPABASE_URL and SUPABASE_KEY environment variables.",
            }), 400

        try:
            dataset = backend.load()
        except StorageError as e:
            cause = e.__cause__
            return jsonify({
                "configured": True,
                "connected": False,
                "error": str(e),
                "details": getattr(cause, "code", None) or type(cause or e).__name__,
            }), 500

        return jsonify({
            "configured": True,
            "connected": True,
            "message": "Supabase connection successful",
            "dataCount": len(dataset),
        }), 200
