import json
import datetime as dt
from pathlib import Path
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from gigs_harness.registry import cases
from gigs_harness.report import HTML_NAME, JSON_NAME, generate_html, generate_json, to_payload
from gigs_harness.runner import default_factories, run_all
from gigs_harness.settings import filter_options, load_settings
from app.models.schemas import CaseInfo, GigsReport, RunPayload

router = APIRouter(prefix="/api/gigs", tags=["gigs"])


def _report_dir() -> Path:
    return Path(load_settings().report_dir)


@router.get("/cases", response_model=List[CaseInfo])
def list_cases(series: Optional[List[int]] = Query(None)):
    return [
        CaseInfo(id=entry.case_id, series=entry.series, code=entry.code, kind=entry.kind, description=entry.name)
        for entry in cases(series)
    ]


@router.get("/report", response_model=GigsReport, response_model_by_alias=True)
def get_gigs_report():
    json_path = _report_dir() / JSON_NAME
    if not json_path.exists():
        raise HTTPException(status_code=404, detail=f"Report JSON not found at {json_path}")
    try:
        return json.loads(json_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/report/html")
def get_gigs_report_html():
    html_path = _report_dir() / HTML_NAME
    if not html_path.exists():
        raise HTTPException(status_code=404, detail=f"Report HTML not found at {html_path}")
    try:
        return HTMLResponse(content=html_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.post("/run", response_model=GigsReport, response_model_by_alias=True)
def run_gigs(payload: Optional[RunPayload] = None):
    """Run the registered cases against pyproj and regenerate the HTML + JSON reports.

    Intended for development; runs synchronously in-process and returns the new JSON.
    """
    payload = payload or RunPayload()
    settings = load_settings()
    if payload.options:
        options = dict(settings.options)
        options.update(filter_options(payload.options, "request"))
        settings = settings.model_copy(update={"options": options})
    generated_at = dt.datetime.now(dt.timezone.utc)
    results = run_all(default_factories(), payload.series or None, settings)
    try:
        generate_json(results, generated_at, settings.report_dir)
        generate_html(results, generated_at, settings.report_dir)
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Could not write reports: {exc}")
    return to_payload(results, generated_at)
