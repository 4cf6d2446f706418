"""Exceptions raised by the detection engine and the ingest layer."""

from typing import Optional


class FraudDetectionError(Exception):
    """Base class for all fraud scanner errors."""


class InvalidConfigurationError(FraudDetectionError):
    """A detection config value is out of range (e.g. batch size <= 0)."""


class MalformedTransactionError(FraudDetectionError):
    """An input record could not be turned into a Transaction."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} at line {line}"
        super().__init__(message)


class BatchFailedError(FraudDetectionError):
    """One or more batches raised during a detection run.

    The partial report, including results from the batches that
    succeeded, is available as ``report``.
    """

    def __init__(self, report) -> None:
        self.report = report
        failed = ", ".join(str(e.batch_index) for e in report.errors)
        super().__init__(f"{len(report.errors)} batch(es) failed: {failed}")
