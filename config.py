import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default=None):
    """Environment variables win over env.yaml"""
    return os.environ.get(key, data.get(key, default))


def _flag(value) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _origins(value):
    if isinstance(value, str):
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    return list(value)


DB_HOST = _get("DB_HOST", "db")
DB_USER = _get("DB_USER", "root")
DB_PASS = _get("DB_PASS", "root")
DB_NAME = _get("DB_NAME", "investco_db")


class ApplicationConfig:
    MOCK_DB = _flag(_get("MOCK_DB", 0))
    DB_URI = _get("DB_URI", f"mysql+aiomysql://{DB_USER}:{DB_PASS}@{DB_HOST}/{DB_NAME}")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = int(_get("PORT", _get("API_PORT", 8080)))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _origins(_get("CORS_ORIGINS", ["*"]))
    CORS_ALLOW_CREDENTIALS = _flag(_get("CORS_ALLOW_CREDENTIALS", False))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = _flag(_get("ENABLE_LOGGING_MIDDLEWARE", 1))
    STATIC_DIR = _get("STATIC_DIR", os.path.join(ROOT_PATH, "public"))
