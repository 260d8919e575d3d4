"""
Output Writer Module
Serializes processing results and maps transactions to storage records.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Union

from ..models import ProcessingResult, Transaction

logger = logging.getLogger(__name__)


def result_to_json(
    result: ProcessingResult,
    indent: int = 2,
    include_raw_text: bool = True
) -> str:
    """
    Serialize a processing result to JSON.

    Args:
        result: Result to serialize
        indent: JSON indentation
        include_raw_text: Whether to embed the source text for diagnostics

    Returns:
        JSON string
    """
    payload = result.to_dict(include_raw_text=include_raw_text)
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def _write_json_text(payload: str, output_path: Union[str, Path]) -> Path:
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(payload, encoding="utf-8")
    return out_path


def write_result_json(
    result: ProcessingResult,
    output_path: Union[str, Path],
    include_raw_text: bool = True
) -> Path:
    """
    Write a processing result to a JSON file, creating parent directories.

    Returns:
        Path of the written file
    """
    out_path = _write_json_text(
        result_to_json(result, include_raw_text=include_raw_text),
        output_path
    )
    logger.info(f"Result written to: {out_path} ({len(result.transactions)} transactions)")
    return out_path


def write_storage_json(
    transactions: Iterable[Transaction],
    user_id: Any,
    output_path: Union[str, Path]
) -> Path:
    """Write the storage records of a user's transactions to a JSON file."""
    records = prepare_for_storage(transactions, user_id)
    out_path = _write_json_text(json.dumps(records, ensure_ascii=False, indent=2), output_path)
    logger.info(f"Storage records written to: {out_path} ({len(records)} records)")
    return out_path


def prepare_for_storage(transactions: Iterable[Transaction], user_id: Any) -> list[dict]:
    """
    Map transactions to records ready for persistence.

    Transactions read from a multi-transaction statement have no single
    receipt image, so receipt_path is always None.

    Args:
        transactions: Validated transactions
        user_id: Owner of the records, supplied by the caller

    Returns:
        List of record dictionaries
    """
    return [
        {
            "user_id": user_id,
            "type": txn.type,
            "amount": float(txn.amount),
            "category": txn.category,
            "description": txn.description,
            "date": txn.date,
            "receipt_path": None,
        }
        for txn in transactions
    ]
