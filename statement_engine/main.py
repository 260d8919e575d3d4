"""
Statement Interpretation Engine - Main Pipeline
Orchestrates segmentation, per-line extraction, validation and summary.
"""

import argparse
import json
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Callable, Optional, Union

from .config import config
from .extractors.assembler import TransactionAssembler, summarize_outcomes
from .extractors.financial_rules import DEFAULT_RULES, RuleSet
from .extractors.segmenter import segment_lines
from .loaders import DocumentLoadError, load_document
from .logging_config import setup_logging
from .models import Candidate, ProcessingResult, SkippedLine
from .output.writer import (
    prepare_for_storage,
    result_to_json,
    write_result_json,
    write_storage_json,
)
from .validators.financial_validator import TransactionValidator, build_summary

logger = logging.getLogger(__name__)

DocumentSource = Union[str, bytes, Callable[[], Union[str, bytes]]]


class StatementProcessor:
    """
    Turns statement text into a ProcessingResult.

    Lines that are not transactions are dropped silently; only a failure to
    obtain or decode the document text produces a failed result.
    """

    def __init__(self, rules: RuleSet = DEFAULT_RULES, max_workers: Optional[int] = None):
        self.rules = rules
        self.max_workers = config.MAX_WORKERS if max_workers is None else max_workers
        self.assembler = TransactionAssembler(rules=rules, max_workers=self.max_workers)
        self.stats = {}

    def process_text(self, text: str) -> ProcessingResult:
        """
        Extract transactions from already-extracted statement text.

        Args:
            text: Full statement text

        Returns:
            Successful ProcessingResult, possibly with no transactions
        """
        lines = segment_lines(text)
        logger.info(f"Starting extraction from {len(lines)} lines")

        # Step 1: per-line classification, extraction and assembly
        outcomes = self.assembler.assemble_all(lines)
        candidates = [outcome for outcome in outcomes if isinstance(outcome, Candidate)]
        skipped = [outcome for outcome in outcomes if isinstance(outcome, SkippedLine)]

        # Step 2: validation, ordering and summary over the full candidate list
        validator = TransactionValidator()
        transactions, rejected = validator.partition(candidates)
        summary = build_summary(transactions)

        self.stats = summarize_outcomes(outcomes)
        self.stats["transactions_found"] = len(transactions)
        self.stats["rejected_candidates"] = len(rejected)

        logger.info(
            f"Extraction complete: {summary.total_transactions} transactions "
            f"({summary.income_count} income, {summary.expense_count} expense), "
            f"{len(skipped) + len(rejected)} lines skipped"
        )
        if not transactions and lines:
            logger.warning(f"No transactions found in {len(lines)} lines")

        return ProcessingResult(
            success=True,
            transactions=tuple(transactions),
            raw_text=text,
            summary=summary,
            skipped=tuple(skipped + rejected)
        )

    def process_document(self, source: DocumentSource) -> ProcessingResult:
        """
        Obtain the statement text from a source, then process it.

        Args:
            source: Text, bytes, or a zero-argument loader returning either

        Returns:
            ProcessingResult; success is False when the text could not be
            obtained or decoded
        """
        try:
            text = self._read_source(source)
        except (DocumentLoadError, UnicodeDecodeError, OSError) as e:
            logger.error(f"Failed to obtain statement text: {e}")
            return ProcessingResult.failure(str(e))

        return self.process_text(text)

    def process_file(self, file_path: Union[str, Path]) -> ProcessingResult:
        """Process a .pdf or .txt statement file."""
        logger.info(f"Processing statement file: {file_path}")
        return self.process_document(partial(load_document, file_path))

    @staticmethod
    def _read_source(source: DocumentSource) -> str:
        if callable(source):
            source = source()
        if isinstance(source, bytes):
            return source.decode(config.TEXT_ENCODING)
        if not isinstance(source, str):
            raise DocumentLoadError(f"Unsupported document source: {type(source).__name__}")
        return source

    def get_stats(self) -> dict:
        """Get statistics of the last run."""
        return dict(self.stats)


def process_statement_text(text: str) -> ProcessingResult:
    """
    Convenience function to process statement text.

    Args:
        text: Bank statement text

    Returns:
        ProcessingResult
    """
    return StatementProcessor().process_text(text)


def process_statement_file(file_path: Union[str, Path]) -> ProcessingResult:
    """Convenience function to process a statement file."""
    return StatementProcessor().process_file(file_path)


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description=config.APP_NAME)
    parser.add_argument("file", help="Statement file (.pdf or .txt)")
    parser.add_argument("--out", default="", help="Write JSON output to this path")
    parser.add_argument("--user-id", default=None, help="Emit storage records for this user")
    parser.add_argument("--workers", type=int, default=None, help="Threads for per-line extraction")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    parser.add_argument("--log-file", default=None, help="Log file name inside LOG_DIR")
    parser.add_argument("--no-raw-text", action="store_true", help="Omit source text from the output")
    args = parser.parse_args(argv)

    setup_logging(log_level=args.log_level, log_file=args.log_file)

    processor = StatementProcessor(max_workers=args.workers)
    result = processor.process_file(args.file)

    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    if args.user_id is not None:
        if args.out:
            write_storage_json(result.transactions, args.user_id, args.out)
        else:
            records = prepare_for_storage(result.transactions, args.user_id)
            print(json.dumps(records, ensure_ascii=False, indent=2))
    elif args.out:
        write_result_json(result, args.out, include_raw_text=not args.no_raw_text)
    else:
        print(result_to_json(result, include_raw_text=not args.no_raw_text))

    logger.info(f"Transactions detected: {result.summary.total_transactions}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
