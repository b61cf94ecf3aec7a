from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.attendance.model import default_dataset
from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.storage.memory_backend import MemoryBackend
from src.attendance_dashboard.attendance_dashboard.storage.selector import StorageSettings


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    # Empty seed so "nothing stored anywhere" reads back as [] instead of the default.
    container = build_container(
        storage_settings=StorageSettings.from_settings(settings),
        memory=MemoryBackend(seed=list),
    )

    existing = container.store.read()
    if existing and "--force" not in sys.argv[1:]:
        print(f"SKIP: store already holds {len(existing)} semesters (use --force to overwrite)")
        return

    backend = container.store.write(default_dataset())
    print(f"OK: Seeded default dataset -> {backend.value}")


if __name__ == "__main__":
    main()
