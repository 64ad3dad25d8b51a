import os

# Upload limits
MAX_FILE_SIZE = int(os.environ.get("PDFSPLIT_MAX_FILE_SIZE_MB", "25")) * 1024 * 1024
MAX_PAGES = int(os.environ.get("PDFSPLIT_MAX_PAGES", "200"))

LOG_LEVEL = os.environ.get("PDFSPLIT_LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    o.strip() for o in os.environ.get("PDFSPLIT_CORS_ORIGINS", "*").split(",") if o.strip()
]
