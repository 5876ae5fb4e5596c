import os
import re
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    PROJECT_NAME: str = "Civil-Finloan API"
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://127.0.0.1:27017")
    MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "civilloan")
    MONGODB_TLS: bool = _as_bool(os.getenv("MONGODB_TLS", "false"))
    MONGODB_TIMEOUT_MS: int = int(os.getenv("MONGODB_TIMEOUT_MS", "30000"))
    CLIENT_URL: str = os.getenv("CLIENT_URL", "http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE")


settings = Settings()


def mask_mongo_uri(uri: str) -> str:
    """Hide credentials in a MongoDB connection string, keeping only the host."""
    if not uri:
        return "mongodb://<redacted>"
    m = re.match(r'(?P<prefix>mongodb(?:\+srv)?://)(?:(?P<creds>[^@]+)@)?(?P<rest>.+)', uri)
    if not m:
        return "mongodb://<redacted>"
    host_part = m.group('rest').split('/')[0]
    if m.group('creds'):
        return f"{m.group('prefix')}***@{host_part}"
    return f"{m.group('prefix')}{host_part}"
