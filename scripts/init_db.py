from __future__ import annotations

import importlib

from school_attendance.config import get_settings_module
from school_attendance.database.bootstrap import apply_schema, list_tables
from school_attendance.database.connection import describe_target
from school_attendance.main import create_app


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    app = create_app()

    apply_schema(app)
    tables = list_tables(app)
    print(f"OK: schema ready -> {describe_target(settings.DB_CONFIG)} (tables={len(tables)}: {', '.join(tables)})")


if __name__ == "__main__":
    main()
