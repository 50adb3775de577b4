from __future__ import annotations

import importlib

from school_attendance.config import get_settings_module
from school_attendance.database.bootstrap import apply_schema, ensure_demo_data
from school_attendance.database.connection import describe_target
from school_attendance.main import create_app


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    app = create_app()

    apply_schema(app)
    ensure_demo_data(app)
    print(f"OK: seeded database -> {describe_target(settings.DB_CONFIG)}")


if __name__ == "__main__":
    main()
