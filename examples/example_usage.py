"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the use cases live in the services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.storage.selector import StorageSettings


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_settings=StorageSettings.from_settings(settings))

    dataset = container.attendance_service.list_semesters()
    summary = container.dashboard_service.build_summary(dataset)
    print(summary.totals)


if __name__ == "__main__":
    main()
