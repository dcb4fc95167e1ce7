#!/usr/bin/env python3
"""
Reset the application database for a fresh start.

Behavior:
- Drops all FitTrack tables and re-creates them (non-app tables are untouched).

Usage:
  python scripts/reset_db.py           # prompts for confirmation
  python scripts/reset_db.py --yes     # no prompt

Reads DATABASE_URL from the environment (or .env); Postgres or SQLite.
"""
from __future__ import annotations
import sys

from sqlmodel import SQLModel

from fittrack.core.config import Settings
from fittrack.core.db import make_engine


def log(msg: str) -> None:
    print(f"[reset-db] {msg}")


def confirm(prompt: str) -> bool:
    try:
        ans = input(f"{prompt} [y/N]: ").strip().lower()
        return ans in ("y", "yes")
    except (EOFError, KeyboardInterrupt):
        return False


def recreate_schema(engine) -> None:
    import fittrack.models  # noqa: F401  (register models)
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


def main(argv: list[str]) -> int:
    yes = "--yes" in argv or "-y" in argv
    settings = Settings()
    log(f"Using DATABASE_URL={settings.DATABASE_URL}")

    if not yes:
        if not confirm("This will ERASE all application data. Continue?"):
            log("aborted by user")
            return 1

    try:
        engine = make_engine(settings.DATABASE_URL)
    except RuntimeError as exc:
        log(str(exc))
        return 2
    recreate_schema(engine)
    log("Schema re-created (app tables).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
