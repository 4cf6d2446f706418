"""Reading transactions from CSV and JSON files.

CSV files carry a header row followed by five columns:
    id,amount,timestamp,account_id,merchant
with RFC 3339 timestamps (e.g. 2026-02-22T10:00:00Z). JSON files hold an
array of objects with the same field names.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import IO, List, Union

from pydantic import AwareDatetime, TypeAdapter, ValidationError

from app.errors import MalformedTransactionError
from app.models import Transaction

_TRANSACTION_LIST = TypeAdapter(List[Transaction])
_TIMESTAMP = TypeAdapter(AwareDatetime)


def _parse_timestamp(value: str, line: int) -> datetime:
    """Parse a timestamp the same way the Transaction model does.

    An explicit UTC offset is required.
    """
    try:
        return _TIMESTAMP.validate_python(value.strip())
    except ValidationError as exc:
        if exc.errors()[0]["type"] == "timezone_aware":
            raise MalformedTransactionError(
                f"timestamp {value!r} has no UTC offset", line
            ) from exc
        raise MalformedTransactionError(f"invalid timestamp {value!r}", line) from exc


def read_csv(file: IO[str]) -> List[Transaction]:
    """Parse transactions from CSV text, skipping the header row."""
    transactions: List[Transaction] = []

    for i, record in enumerate(csv.reader(file)):
        line = i + 1
        if i == 0:
            continue
        if not record:
            continue
        if len(record) < 5:
            raise MalformedTransactionError("invalid CSV format", line)

        try:
            amount = float(record[1])
        except ValueError as exc:
            raise MalformedTransactionError(f"invalid amount {record[1]!r}", line) from exc

        transactions.append(
            Transaction(
                id=record[0],
                amount=amount,
                timestamp=_parse_timestamp(record[2], line),
                account_id=record[3],
                merchant=record[4],
            )
        )

    return transactions


def read_json(file: IO[str]) -> List[Transaction]:
    """Parse a JSON array of transaction objects."""
    try:
        data = json.load(file)
    except json.JSONDecodeError as exc:
        raise MalformedTransactionError(f"invalid JSON: {exc.msg}", exc.lineno) from exc

    try:
        return _TRANSACTION_LIST.validate_python(data)
    except ValidationError as exc:
        raise MalformedTransactionError(f"invalid transaction data: {exc}") from exc


def load_transactions(
    path: Union[str, Path],
    file_type: str = "csv",
) -> List[Transaction]:
    """Read transactions from a file of the given type ("csv" or "json")."""
    kind = file_type.lower()
    if kind not in ("csv", "json"):
        raise ValueError(f"unsupported file type: {file_type}")

    with open(path, "r", newline="" if kind == "csv" else None) as f:
        if kind == "csv":
            return read_csv(f)
        return read_json(f)
