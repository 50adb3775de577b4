import os

from .base import database_uri, db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# No default: token routes answer 500 until JWT_SECRET is set
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

DB_CONFIG = db_config_from_env()
SQLALCHEMY_DATABASE_URI = database_uri(DB_CONFIG)

PORT = int(os.getenv("PORT", "3000"))
DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
