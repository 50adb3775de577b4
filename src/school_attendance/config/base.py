import os
import urllib.parse


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", os.getenv("DB_DATABASE", "attendance_db")),
    }


def database_uri(db_config: dict) -> str:
    """SQLAlchemy URI for the MySQL target, unless DATABASE_URL overrides it."""
    override = os.getenv("DATABASE_URL")
    if override:
        return override.strip()

    # quote_plus keeps passwords containing '@' or ':' intact
    password = urllib.parse.quote_plus(str(db_config["password"]))
    return (
        f"mysql+mysqlconnector://{db_config['user']}:{password}"
        f"@{db_config['host']}:{db_config['port']}/{db_config['database']}"
    )


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))
