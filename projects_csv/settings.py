# projects_csv/settings.py
import os

LOG_LEVEL = os.getenv("PROJECTS_CSV_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv(
    "PROJECTS_CSV_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s :: %(message)s"
)

# Uploads above this size are rejected with 413
MAX_UPLOAD_BYTES = int(os.getenv("PROJECTS_CSV_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

EXPORT_FILENAME = os.getenv("PROJECTS_CSV_EXPORT_FILENAME", "projects_updated.csv")

# uvicorn bind address for `python -m projects_csv`
HOST = os.getenv("PROJECTS_CSV_HOST", "127.0.0.1")
PORT = int(os.getenv("PROJECTS_CSV_PORT", "8000"))
