"""In-memory storage for completed detection runs.

Runs are kept in a dict keyed by run id. All data lives in memory and is
lost on restart.
"""

import threading
from datetime import datetime
from typing import Dict, List, Optional

from app.models import DetectionRun


class RunStore:
    """Thread-safe in-memory store for detection runs."""

    def __init__(self) -> None:
        self._runs: Dict[str, DetectionRun] = {}
        self._lock = threading.Lock()

    def add(self, run: DetectionRun) -> None:
        """Store a run under its run id."""
        with self._lock:
            self._runs[run.run_id] = run

    def get(self, run_id: str) -> Optional[DetectionRun]:
        """Return the run with this id, or None."""
        with self._lock:
            return self._runs.get(run_id)

    def get_all(
        self,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[DetectionRun]:
        """Return runs in insertion order, optionally filtered by creation time."""
        with self._lock:
            runs = list(self._runs.values())

        results: List[DetectionRun] = []
        for run in runs:
            if since is not None and run.created_at < since:
                continue
            if until is not None and run.created_at > until:
                continue
            results.append(run)
        return results
