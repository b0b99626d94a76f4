"""Failure conditions that abort a reconciliation pass.

Every error carries enough context (names, source kind, conflicting records) for
the caller to report it or re-run with corrected input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kancolle_a.domain.model.enums import SourceKind


class ReconciliationError(RuntimeError):
    """Base class for all reconciliation failures."""


class UnrecognizedStageSuffixError(ReconciliationError, ValueError):
    """Raised when a ship name carries an upgrade-stage suffix we have never seen."""

    def __init__(self, name: str, suffix: str) -> None:
        super().__init__(f"Unrecognized upgrade stage suffix {suffix!r} in {name!r}")
        self.name = name
        self.suffix = suffix


class DuplicateSourceRecordError(ReconciliationError):
    """Raised when one source contributes two records for the same name."""

    def __init__(
        self,
        name: str,
        source: SourceKind,
        *,
        existing: object | None = None,
        duplicate: object | None = None,
    ) -> None:
        super().__init__(f"Duplicate {source} entry for {name}")
        self.name = name
        self.source = source
        self.existing = existing
        self.duplicate = duplicate


class InvariantViolationError(ReconciliationError):
    """Raised when an assembled ship or stage is internally inconsistent."""

    def __init__(self, ship_name: str, detail: str, *, stage_name: str | None = None) -> None:
        location = ship_name if stage_name is None else f"{ship_name} ({stage_name})"
        super().__init__(f"{location}: {detail}")
        self.ship_name = ship_name
        self.stage_name = stage_name
        self.detail = detail


class PictureBookShapeError(ReconciliationError):
    """Raised when a dual-row picture-book entry cannot be split as classified."""

    def __init__(self, book_no: int, detail: str, *, priority: int | None = None) -> None:
        location = f"book {book_no}" if priority is None else f"book {book_no} page {priority}"
        super().__init__(f"{location}: {detail}")
        self.book_no = book_no
        self.priority = priority
        self.detail = detail
