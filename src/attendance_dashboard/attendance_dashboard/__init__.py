"""Attendance Dashboard package.

This package is organized by feature modules (attendance, storage, dashboard)
with a thin Flask controller layer over service and storage layers.
"""
