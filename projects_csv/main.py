import logging
from typing import List

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.responses import Response

from . import settings
from .encoding import decode_csv_bytes
from .models import HealthResponse, ParseReport, ParseResponse, ProjectRecord
from .normalize import normalize_rows
from .rules import BOM, PROJECT_STATUSES
from .serialize import serialize_projects
from .setup_logging import setup_logging
from .tokenizer import parse_csv

setup_logging(settings.LOG_LEVEL)
log = logging.getLogger(__name__)

app = FastAPI(
    title="projects-csv",
    description="Project-tracker spreadsheet ingestion and export",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/projects/parse", response_model=ParseResponse)
async def parse_projects(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(".csv"):
        log.warning("rejected upload %r: not a .csv file", file.filename)
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    # read at most one byte past the limit
    raw = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(raw) > settings.MAX_UPLOAD_BYTES:
        log.warning("rejected upload %r: over %d bytes", file.filename, settings.MAX_UPLOAD_BYTES)
        raise HTTPException(status_code=413, detail="CSV file is too large")

    text, encoding = decode_csv_bytes(raw)
    rows = parse_csv(text.replace(BOM, ""))
    projects = normalize_rows(rows)

    data_rows = max(len(rows) - 1, 0)
    unknown = sorted({p.status for p in projects if p.status and p.status not in PROJECT_STATUSES})
    log.info(
        "parsed %s: encoding=%s rows=%d projects=%d",
        file.filename, encoding, data_rows, len(projects),
    )

    return ParseResponse(
        projects=[p.to_row() for p in projects],
        report=ParseReport(
            encoding=encoding,
            rows=data_rows,
            projects=len(projects),
            dropped=data_rows - len(projects),
            unknown_statuses=unknown,
        ),
    )

@app.post("/projects/export")
def export_projects(projects: List[ProjectRecord]):
    content = serialize_projects(projects)
    log.info("exported %d projects", len(projects))
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{settings.EXPORT_FILENAME}"'},
    )
