import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("CONFIG_FILE", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./adaboards.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:5173"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 7 * 24 * 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 10))
    MIN_PASSWORD_LENGTH = int(data.get("MIN_PASSWORD_LENGTH", 6))
    SEARCH_DEFAULT_LIMIT = int(data.get("SEARCH_DEFAULT_LIMIT", 10))
    SEARCH_MAX_LIMIT = int(data.get("SEARCH_MAX_LIMIT", 50))
