"""Detection endpoints for scanning transaction sets and reviewing past runs."""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import AwareDatetime

from app.detection.scheduler import BatchScheduler
from app.detection.summary import summarize
from app.models import DetectionRequest, DetectionResponse, DetectionRun
from app.storage.memory import RunStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _get_store(request: Request) -> RunStore:
    """Retrieve the run store from application state."""
    return request.app.state.store


@router.post("/detection", response_model=DetectionResponse)
async def run_detection(
    body: DetectionRequest,
    request: Request,
) -> DetectionResponse:
    """Scan a transaction set for high amounts and rapid succession.

    Uses the config in the request body if given, otherwise the service
    config. Failed batches are reported in ``errors``; flags from the
    other batches are still returned.
    """
    config = body.config or request.app.state.config
    report = BatchScheduler(config).run(body.transactions)
    summary = summarize(report.results)

    run = DetectionRun(
        run_id=str(uuid.uuid4()),
        created_at=datetime.now(timezone.utc),
        config=config,
        total_transactions=report.total_transactions,
        batch_count=report.batch_count,
        flagged=report.results,
        errors=report.errors,
        summary=summary,
    )
    _get_store(request).add(run)
    logger.info(
        "Run %s flagged %d results across %d batches",
        run.run_id, summary.total_flags, report.batch_count,
    )

    return DetectionResponse(
        run_id=run.run_id,
        total_transactions=run.total_transactions,
        batch_count=run.batch_count,
        flagged=run.flagged,
        errors=run.errors,
        summary=run.summary,
    )


@router.get("/detection/{run_id}", response_model=DetectionRun)
async def get_detection_run(run_id: str, request: Request) -> DetectionRun:
    """Return a stored detection run by id."""
    run = _get_store(request).get(run_id)
    if run is None:
        raise HTTPException(status_code=404, detail=f"Run '{run_id}' not found")
    return run


@router.get("/detection", response_model=List[DetectionRun])
async def list_detection_runs(
    request: Request,
    from_date: Optional[AwareDatetime] = Query(default=None),
    to_date: Optional[AwareDatetime] = Query(default=None),
) -> List[DetectionRun]:
    """List stored runs, optionally filtered by creation time.

    Filters:
      - from_date: runs created at or after this value
      - to_date: runs created at or before this value
    """
    return _get_store(request).get_all(since=from_date, until=to_date)
