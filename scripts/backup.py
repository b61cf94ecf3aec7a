"""Export the current attendance dataset to a timestamped JSON file.

Note: Reads through the normal storage chain (Supabase > file > memory), so the
backup reflects whatever the running configuration would serve.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.attendance.model import dataset_to_json
from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.storage.selector import StorageSettings


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_settings=StorageSettings.from_settings(settings))

    dataset = container.store.read()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{ts}.json"
    out_file.write_text(json.dumps(dataset_to_json(dataset), indent=2, ensure_ascii=False), encoding="utf-8")

    print(f"OK: Backup created: {out_file} ({len(dataset)} semesters)")


if __name__ == "__main__":
    main()
