SECRET_KEY = "test-secret"

JWT_SECRET = "test-jwt-secret"
JWT_EXPIRES_DAYS = 7

DB_CONFIG = {
    "host": "localhost",
    "port": 0,
    "user": "test",
    "password": "",
    "database": ":memory:",
}
SQLALCHEMY_DATABASE_URI = "sqlite://"

PORT = 3000
DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
