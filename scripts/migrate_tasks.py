"""One-off migration script: JSON task file -> SQL database (ids preserved)."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the taskapi package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taskapi.core.config import get_settings
from taskapi.repositories.json_storage import load
from taskapi.repositories.sql_repository import SQLTaskRepository


def migrate(data_file: Path, database_url: str | None = None) -> int:
    if not data_file.exists():
        raise SystemExit(f"File not found: {data_file}")
    repo = SQLTaskRepository(database_url)
    tasks = load(data_file)
    for task in tasks:
        repo.import_task(task)
    return len(tasks)


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy tasks from a JSON file into the SQL database")
    ap.add_argument("--data-file", default=settings.tasks_data_file, help="Source JSON array file")
    ap.add_argument("--database-url", default=settings.database_url, help="Target SQLAlchemy URL")
    args = ap.parse_args()
    count = migrate(Path(args.data_file), args.database_url or None)
    print(f"{count} task(s) migrated to {args.database_url or 'DATABASE_URL'}.")


if __name__ == "__main__":
    main()
