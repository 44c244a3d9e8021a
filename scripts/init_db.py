from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from school_portal.config import get_settings_module
from school_portal.database.bootstrap import apply_sql_file, ensure_database_exists, list_tables
from school_portal.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_settings(settings.DB_CONFIG)

    schema_path = Path(__file__).resolve().parents[1] / "database" / "schema.sql"
    ensure_database_exists(config)
    apply_sql_file(config, schema_path)
    tables = list_tables(config)
    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
