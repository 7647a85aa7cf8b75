import uvicorn

from . import settings


def main():
    """Serve the API with uvicorn (`python -m projects_csv` or `projects-csv`)."""
    uvicorn.run(
        "projects_csv.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
