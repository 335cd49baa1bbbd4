import os

PORT = int(os.environ.get("PORT", "3000"))
HOST = os.environ.get("HOST", "0.0.0.0")
NODE_ENV = os.environ.get("NODE_ENV", "development")

SCAN_LOG_FILE = os.environ.get("SCAN_LOG_FILE", "logs.json")
DEFAULT_REDIRECT = os.environ.get("DEFAULT_REDIRECT", "https://example.com")
DEFAULT_CAMPAIGN = "UNKNOWN"

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def is_production():
    return NODE_ENV == "production"
