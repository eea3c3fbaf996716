"""Session logger for recording feed fetches to JSON files."""

import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from pulse_report.data import Fallback, FetchResult


class FetchRecord(BaseModel):
    """Record of a single fetch issued by the controller."""

    operation: str
    params: dict[str, Any] = {}
    outcome: str
    cause: str | None = None
    article_count: int = 0
    total_results: int = 0
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of one client session."""

    session_id: str
    started_at: str
    completed_at: str | None = None
    fetches: list[FetchRecord] = []
    degraded_fetches: int = 0


class SessionLogger:
    """Accumulates fetch records and writes a JSON log file per session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    @property
    def record(self) -> SessionRecord | None:
        return self._record

    def start_session(self) -> SessionRecord | None:
        """Open a new session record. Returns None when logging is disabled."""
        if not self._enabled:
            return None

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            started_at=datetime.now(tz=UTC).isoformat(),
        )
        return self._record

    def log_fetch(
        self,
        operation: str,
        params: dict[str, Any],
        result: FetchResult | None,
        duration_seconds: float,
        *,
        error: str | None = None,
    ) -> None:
        """Append a fetch record, starting a session if none is open.

        Args:
            operation: Fetcher operation name (e.g. "search_news").
            params: Scalar parameters the operation was called with.
            result: The fetch result, or None if the fetch raised.
            duration_seconds: Wall-clock time of the fetch.
            error: Failure description when ``result`` is None.
        """
        record = self._record or self.start_session()
        if record is None:
            return

        if result is None:
            outcome, cause, count, total = "error", error, 0, 0
        elif isinstance(result, Fallback):
            outcome, cause = "fallback", result.cause
            count, total = len(result.page), result.page.total_results
        else:
            outcome, cause = "live", None
            count, total = len(result.page), result.page.total_results

        if outcome != "live":
            record.degraded_fetches += 1
        record.fetches.append(
            FetchRecord(
                operation=operation,
                params=params,
                outcome=outcome,
                cause=cause,
                article_count=count,
                total_results=total,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_session(self) -> Path | None:
        """Write the session record to a JSON file.

        Returns:
            Path to the written JSON file, or None if logging is disabled
            or nothing was recorded.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00.json
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"session_{ts}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
