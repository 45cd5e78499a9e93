from __future__ import annotations

import json
import logging
from typing import Optional
from fastapi import FastAPI, UploadFile, File, Request
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from . import __version__, config, data, loader
from .coverage import evaluate
from .demand import aggregate, demand_totals
from .export import coverage_to_dict, demand_to_dict, order_pdf_bytes, order_to_dict
from .loader import LoaderError
from .planner import compute_order
from .session import PhaseTransitionError, Session
from .stats import summarize

logger = logging.getLogger(__name__)

app = FastAPI(title="Loading Order", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Simple in-memory session reused across requests
current_session = Session(groups=data.sample_groups(), stations=data.sample_stations())


def reset_session() -> Session:
    global current_session
    current_session = Session(groups=data.sample_groups(), stations=data.sample_stations())
    return current_session


@app.exception_handler(LoaderError)
async def loader_error_handler(request: Request, exc: LoaderError):
    logger.warning("rejected upload: %s", exc)
    return JSONResponse({"error": str(exc)}, status_code=400)


@app.exception_handler(PhaseTransitionError)
async def phase_error_handler(request: Request, exc: PhaseTransitionError):
    return JSONResponse({"error": str(exc), "phase": current_session.phase}, status_code=409)


def _read_bytes(file: Optional[UploadFile]) -> Optional[bytes]:
    if file is None:
        return None
    return file.file.read()


def _order_payload() -> dict:
    demand = aggregate(current_session.groups)
    coverage = evaluate(demand, current_session.stations)
    order = compute_order(demand, current_session.stations)
    return order_to_dict(order, coverage)


@app.post("/api/run")
async def run_session(
    groups: UploadFile | None = File(default=None),
    stations: UploadFile | None = File(default=None),
):
    # Load user-provided or sample data; an uploaded empty list stays empty
    raw_groups = _read_bytes(groups)
    raw_stations = _read_bytes(stations)
    group_list = loader.load_groups(raw_groups) if raw_groups is not None else data.sample_groups()
    station_list = loader.load_stations(raw_stations) if raw_stations is not None else data.sample_stations()
    current_session.groups = group_list
    current_session.stations = station_list

    payload = _order_payload()
    if config.WRITE_OUTPUT:
        config.OUTPUT_DIR.mkdir(exist_ok=True, parents=True)
        (config.OUTPUT_DIR / "order.json").write_text(json.dumps(payload, indent=2))
    return JSONResponse(payload)


@app.get("/api/demand")
async def get_demand():
    demand = aggregate(current_session.groups)
    return demand_to_dict(demand_totals(demand), summarize(current_session.groups))


@app.get("/api/coverage")
async def get_coverage():
    demand = aggregate(current_session.groups)
    return coverage_to_dict(evaluate(demand, current_session.stations))


@app.get("/api/order")
async def get_order():
    return _order_payload()


@app.get("/api/order.pdf")
async def get_order_pdf():
    demand = aggregate(current_session.groups)
    pdf_bytes = order_pdf_bytes(
        compute_order(demand, current_session.stations),
        evaluate(demand, current_session.stations),
    )
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="order.pdf"'},
    )


@app.get("/api/session")
async def get_session():
    return {
        "phase": current_session.phase,
        "groups": len(current_session.groups),
        "stations": len(current_session.stations),
    }


@app.post("/api/session/phase")
async def set_phase(request: Request):
    body = await request.body()
    target = None
    if body:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError:
            return JSONResponse({"error": "body must be JSON"}, status_code=400)
        if not isinstance(payload, dict):
            return JSONResponse({"error": "body must be a JSON object"}, status_code=400)
        target = payload.get("phase")
    phase = current_session.advance(target)
    logger.info("session moved to %s", phase)
    return {"phase": phase}
