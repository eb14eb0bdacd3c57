import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from core.config_loader import config_loader
from core.models.sensor_reading import TRIGGER_FIELD, SensorReading
from core.processing.report_formatter import ReportFormatter
from core.services.report_store import StorageWriteError, report_store
from core.services.status_page import render_status_page
from schemas import ErrorResponse, IngestAck

logger = logging.getLogger(__name__)

router = APIRouter(tags=["station"])

STATION_RESPONSES = {
    200: {
        "description": "Status page (browser) or ingest acknowledgement (sensor POST).",
        "content": {
            "text/html": {},
            "application/json": {"example": {"status": "ok", "bytes": 812}},
        },
    },
    500: {
        "description": "The report file could not be written.",
        "model": ErrorResponse,
        "content": {
            "application/json": {
                "example": {"detail": "Failed to open file! [Errno 13] Permission denied"}
            }
        },
    },
}


def ingest(form) -> JSONResponse:
    """Format one reading and replace the stored report with it."""
    reading = SensorReading.from_form(form)
    missing = reading.missing_fields()
    if missing:
        logger.warning(f"Ingest missing fields, rendering them empty: {', '.join(missing)}")

    report_store.log_post(form.multi_items())

    formatter = ReportFormatter(config_loader.get_timezone(), config_loader.get_config().localLabel)
    text = formatter.build(reading)
    try:
        written = report_store.write(text)
    except StorageWriteError as e:
        raise HTTPException(status_code=500, detail=f"Failed to open file! {e.cause}")

    logger.info(f"Ingested reading: {reading.temperature}°C, {reading.humidity}%, {reading.pressure}hPa")
    return JSONResponse(IngestAck(status="ok", bytes=written).model_dump())


def render() -> HTMLResponse:
    """Serve the stored report inside the auto-refreshing status page."""
    report = report_store.read()
    return HTMLResponse(render_status_page(report, config_loader.get_config()))


@router.api_route("/", methods=["GET", "POST"], response_class=HTMLResponse, responses=STATION_RESPONSES)
@router.api_route("/index.php", methods=["GET", "POST"], response_class=HTMLResponse,
                  responses=STATION_RESPONSES, include_in_schema=False)
async def station(request: Request) -> Response:
    """
    Single entry point for the sensor and for browsers.

    A POST carrying a `temperature` form field is an ingest from the sensor
    device. Anything else renders the status page.
    """
    if request.method == "POST":
        form = await request.form()
        if TRIGGER_FIELD in form:
            return ingest(form)
    return render()
