"""Delegate CSV import service.

Bulk-registers delegates from CSV text, one delegate per row. The header
row names the columns (case-insensitive, surrounding whitespace ignored):

    name, school, committeeid, committee, portfolioid, portfolio,
    email, phone, status, notes

Row Rules:
- name and email are required; rows missing either are skipped
- status, when present, must be registered / confirmed / checked-in
- committeeid and portfolioid, when present, must be UUIDs
- Unknown columns are ignored
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from structlog import get_logger

from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.domain.errors import DelegateImportError
from mun_admin.domain.models import Delegate, DelegateStatus

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("name", "email")


@dataclass(frozen=True)
class DelegateImportResult:
    """Outcome of one CSV import.

    Attributes:
        imported: Number of delegates created.
        skipped: Number of data rows rejected.
        delegates: The created delegates in file order.
    """

    imported: int
    skipped: int
    delegates: tuple[Delegate, ...] = field(default_factory=tuple)


class _RowRejected(Exception):
    """A single CSV row could not become a delegate."""


def _cell(row: dict[str, Optional[str]], column: str) -> Optional[str]:
    value = row.get(column)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_uuid(row: dict[str, Optional[str]], column: str) -> Optional[UUID]:
    value = _cell(row, column)
    if value is None:
        return None
    try:
        return UUID(value)
    except ValueError:
        raise _RowRejected(f"{column} is not a UUID") from None


def _parse_status(row: dict[str, Optional[str]]) -> DelegateStatus:
    value = _cell(row, "status")
    if value is None:
        return DelegateStatus.REGISTERED
    try:
        return DelegateStatus(value.lower())
    except ValueError:
        raise _RowRejected(f"unknown status {value!r}") from None


def _row_to_delegate(row: dict[str, Optional[str]]) -> Delegate:
    name = _cell(row, "name")
    email = _cell(row, "email")
    if name is None or email is None:
        raise _RowRejected("name and email are required")

    return Delegate(
        id=uuid4(),
        name=name,
        email=email,
        school=_cell(row, "school") or "",
        committee=_cell(row, "committee") or "",
        portfolio=_cell(row, "portfolio") or "",
        committee_id=_parse_uuid(row, "committeeid"),
        portfolio_id=_parse_uuid(row, "portfolioid"),
        phone=_cell(row, "phone"),
        status=_parse_status(row),
        notes=_cell(row, "notes"),
    )


class DelegateImportService:
    """Creates delegates from CSV text."""

    def __init__(self, delegates: RecordStoreProtocol[Delegate]) -> None:
        self._delegates = delegates

    async def import_delegates(self, csv_text: str) -> DelegateImportResult:
        """Parse ``csv_text`` and store one delegate per valid row.

        Args:
            csv_text: CSV document including a header row.

        Returns:
            Counts of imported and skipped rows plus the new delegates.

        Raises:
            DelegateImportError: If there is no header row or it lacks
                the name or email column.
        """
        reader = csv.DictReader(io.StringIO(csv_text.strip()))
        if reader.fieldnames is None:
            raise DelegateImportError("CSV has no header row")

        reader.fieldnames = [column.strip().lower() for column in reader.fieldnames]
        missing = [c for c in REQUIRED_COLUMNS if c not in reader.fieldnames]
        if missing:
            raise DelegateImportError(
                f"header is missing required columns: {', '.join(missing)}"
            )

        log = logger.bind(component="delegate_import")
        created: list[Delegate] = []
        skipped = 0
        for line_number, row in enumerate(reader, start=2):
            try:
                delegate = _row_to_delegate(row)
            except _RowRejected as e:
                skipped += 1
                log.debug("import_row_skipped", line=line_number, reason=str(e))
                continue
            created.append(await self._delegates.insert(delegate))

        log.info("delegates_imported", imported=len(created), skipped=skipped)
        return DelegateImportResult(
            imported=len(created),
            skipped=skipped,
            delegates=tuple(created),
        )
