#!/usr/bin/env python3
"""
Run Alembic migrations for the transaction store.

Usage:
    python scripts/run_migrations.py upgrade [head]
    python scripts/run_migrations.py downgrade [base]
    python scripts/run_migrations.py current
    python scripts/run_migrations.py history

DATABASE_URL selects the target database (see src/config.py).
"""

import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

ROOT_DIR = Path(__file__).resolve().parent.parent

COMMANDS = {
    "upgrade": ("head", command.upgrade),
    "downgrade": ("base", command.downgrade),
}


def main() -> int:
    """Dispatch an Alembic command."""
    if len(sys.argv) < 2:
        print("Usage: python scripts/run_migrations.py [command] [args...]")
        print("Commands: upgrade, downgrade, current, history")
        return 1

    config = Config(str(ROOT_DIR / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT_DIR / "alembic"))

    cmd = sys.argv[1]

    if cmd in COMMANDS:
        default_target, run = COMMANDS[cmd]
        target = sys.argv[2] if len(sys.argv) > 2 else default_target
        print(f"Running: alembic {cmd} {target}")
        run(config, target)
        print(f"✓ {cmd} complete")
    elif cmd == "current":
        command.current(config)
    elif cmd == "history":
        command.history(config)
    else:
        print(f"Unknown command: {cmd}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
