"""Pydantic models for the batch fraud scanner."""

from datetime import datetime, timedelta
from typing import Literal, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """A single financial transaction. Immutable once constructed."""
    model_config = ConfigDict(frozen=True)

    id: str
    amount: float
    timestamp: AwareDatetime
    account_id: str
    merchant: str


class DetectionConfig(BaseModel):
    """Thresholds and batching parameters for one detection run.

    Values are not range-checked here; the engine rejects non-positive
    batch sizes, windows and worker caps before doing any work.
    """
    model_config = ConfigDict(frozen=True)

    high_amount_threshold: float = 1000.0
    time_window: timedelta = timedelta(minutes=5)
    batch_size: int = 100
    max_workers: Optional[int] = None  # None = one worker per batch


class FlaggedResult(BaseModel):
    """A transaction flagged by one rule, with a human-readable reason."""
    model_config = ConfigDict(frozen=True)

    transaction: Transaction
    reason: str
    rule: Literal["HIGH_AMOUNT", "RAPID_SUCCESSION"]


class BatchError(BaseModel):
    """A batch that failed during evaluation."""
    batch_index: int
    error: str


class DetectionReport(BaseModel):
    """Merged output of a scheduler run."""
    results: list[FlaggedResult]
    errors: list[BatchError] = Field(default_factory=list)
    total_transactions: int
    batch_count: int


class DetectionSummary(BaseModel):
    """Aggregate statistics over a set of flagged results."""
    total_flags: int
    flagged_transactions: int
    high_amount: int
    rapid_succession: int
    accounts: list[str]


class DetectionRequest(BaseModel):
    """A transaction set to scan, with an optional per-request config."""
    transactions: list[Transaction]
    config: Optional[DetectionConfig] = None


class DetectionResponse(BaseModel):
    """Result of scanning a transaction set."""
    run_id: str
    total_transactions: int
    batch_count: int
    flagged: list[FlaggedResult]
    errors: list[BatchError]
    summary: DetectionSummary


class DetectionRun(BaseModel):
    """A completed detection run persisted in the in-memory store."""
    run_id: str
    created_at: datetime
    config: DetectionConfig
    total_transactions: int
    batch_count: int
    flagged: list[FlaggedResult]
    errors: list[BatchError]
    summary: DetectionSummary
