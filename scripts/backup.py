"""Backup the roster data file.

Note: Copies the flat file as-is into `backups/` with a timestamp suffix.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_file = Path(settings.DATA_FILE)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{data_file.stem}_{ts}{data_file.suffix}"

    try:
        shutil.copyfile(data_file, out_file)
    except FileNotFoundError:
        raise SystemExit(f"Data file not found: {data_file}. Run the admin flow or scripts/seed_data.py first.")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
