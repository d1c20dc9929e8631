"""CSV import domain service."""

import csv
import hashlib
import logging
import os
import tempfile
from typing import Iterable, Optional, Sequence

from expensetrack.database.base import Database
from expensetrack.domain.entities import Expense, ImportResult, SkippedRow, UserIdentity
from expensetrack.domain.errors import (
    ImportFailedError,
    ResourceError,
    ValidationError,
    no_rows_imported,
)
from expensetrack.domain.uploads import UploadError, UploadedFile
from expensetrack.utils.amount_parser import parse_amount, to_cents
from expensetrack.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = 4

INVALID_COLUMN_COUNT = "Invalid column count"
EMPTY_DESCRIPTION = "Empty description"
UNKNOWN_CATEGORY = "Unknown category"
INVALID_DATE = "Invalid date format"
INVALID_AMOUNT = "Invalid amount format"
NON_POSITIVE_AMOUNT = "Amount must be greater than 0"
DUPLICATE_ENTRY = "Duplicate entry"


def validate_csv_row(row: Sequence[str], categories: Iterable[str]) -> Optional[str]:
    """Check one row of an import file.

    Rows hold date, amount, description and category, in that order. The
    first failing check decides the reason.

    Returns:
        The skip reason, or None when the row is valid
    """
    if len(row) != EXPECTED_COLUMNS:
        return INVALID_COLUMN_COUNT

    date_str, amount_str, description, category = row

    if not description.strip():
        return EMPTY_DESCRIPTION

    if category.strip().lower() not in categories:
        return UNKNOWN_CATEGORY

    try:
        parse_date(date_str)
    except ValueError:
        return INVALID_DATE

    try:
        amount = parse_amount(amount_str, require_decimal_point=True)
    except ValueError:
        return INVALID_AMOUNT

    if amount <= 0:
        return NON_POSITIVE_AMOUNT

    return None


def row_fingerprint(row: Sequence[str]) -> str:
    """Hash of the raw field content, used to spot repeated rows."""
    return hashlib.md5("".join(row).encode("utf-8")).hexdigest()


def row_to_expense(row: Sequence[str], user: UserIdentity) -> Expense:
    """Convert a validated row into an unsaved expense."""
    date_str, amount_str, description, category = row
    amount = parse_amount(amount_str, require_decimal_point=True)
    return Expense(
        id=None,
        user_id=user.id,
        date=parse_date(date_str),
        category=category.strip().lower(),
        amount=amount,
        amount_cents=to_cents(amount),
        description=description.strip(),
    )


class CSVImportService:
    """Service for importing expenses from CSV files."""

    def __init__(self, db: Database, categories: Iterable[str] = ()):
        """Initialize CSV import service.

        Args:
            db: Database instance
            categories: Configured category names rows may use
        """
        self.db = db
        self.categories = {name.strip().lower() for name in categories}

    def import_csv(self, user: UserIdentity, uploaded_file: UploadedFile) -> ImportResult:
        """Import expenses from an uploaded CSV file.

        Invalid and repeated rows are skipped and logged; the remaining rows
        are stored in a single transaction.

        Args:
            user: Owner of the imported expenses
            uploaded_file: File to import, one expense per line

        Returns:
            ImportResult with the number of stored expenses and the skipped rows

        Raises:
            ValidationError: If the upload did not arrive intact
            ResourceError: If the file cannot be opened or read
            ImportFailedError: If no row is valid or storing the batch fails
        """
        if uploaded_file.error is not UploadError.OK:
            raise ValidationError(
                f"Uploaded file cannot be imported ({uploaded_file.error.name})"
            )

        fd, tmp_path = tempfile.mkstemp(prefix="csv_import_", suffix=".csv")
        os.close(fd)
        try:
            expenses, skipped_rows = self._read_file(uploaded_file, tmp_path, user)
            self._log_skipped(skipped_rows)

            if not expenses:
                reasons = dict.fromkeys(skipped.reason for skipped in skipped_rows)
                logger.info(
                    "CSV import completed: imported_count=0 skipped_count=%d",
                    len(skipped_rows),
                )
                raise ImportFailedError(no_rows_imported(reasons))

            try:
                imported_count = self.db.import_many(expenses)
            except ResourceError as e:
                raise ImportFailedError(f"Import failed while saving: {e}") from e

            logger.info(
                "CSV import completed: imported_count=%d skipped_count=%d",
                imported_count,
                len(skipped_rows),
            )
            return ImportResult(
                imported_count=imported_count, skipped_rows=tuple(skipped_rows)
            )
        finally:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def _read_file(
        self, uploaded_file: UploadedFile, tmp_path: str, user: UserIdentity
    ) -> tuple[list[Expense], list[SkippedRow]]:
        try:
            uploaded_file.move_to(tmp_path)
            handle = open(tmp_path, "r", newline="", encoding="utf-8-sig")
        except OSError as e:
            raise ResourceError(f"Failed to open CSV file: {e}") from e

        with handle:
            try:
                return self._process_rows(csv.reader(handle), user)
            except (UnicodeDecodeError, csv.Error) as e:
                raise ResourceError(f"Failed to read CSV file: {e}") from e

    def _process_rows(
        self, rows: Iterable[list[str]], user: UserIdentity
    ) -> tuple[list[Expense], list[SkippedRow]]:
        expenses: list[Expense] = []
        skipped_rows: list[SkippedRow] = []
        seen: set[str] = set()

        for row in rows:
            reason = validate_csv_row(row, self.categories)
            if reason is None:
                fingerprint = row_fingerprint(row)
                if fingerprint in seen:
                    reason = DUPLICATE_ENTRY
                else:
                    seen.add(fingerprint)

            if reason is not None:
                skipped_rows.append(SkippedRow(row=tuple(row), reason=reason))
                continue

            expenses.append(row_to_expense(row, user))

        return expenses, skipped_rows

    def _log_skipped(self, skipped_rows: Sequence[SkippedRow]) -> None:
        for skipped in skipped_rows:
            logger.warning(
                "Skipped CSV row during import: row=%r reason=%s",
                ",".join(skipped.row),
                skipped.reason,
            )
