"""History store — append-only tool-call log with a bounded queryable window."""

from __future__ import annotations

import logging
import os
import threading
from abc import ABC, abstractmethod
from collections import deque
from io import FileIO
from pathlib import Path
from types import TracebackType

from pydantic import BaseModel, Field, ValidationError

from introspect.core.errors import CorruptHistoryError, PersistenceError
from introspect.runtime.categories import categorize
from introspect.schemas.call_record import CallRecord, ToolCall
from introspect.settings import IntrospectSettings

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 1000


class LoadReport(BaseModel):
    """What a load pass found in the persisted log."""

    lines_read: int = Field(ge=0, default=0)
    records_loaded: int = Field(ge=0, default=0)
    records_retained: int = Field(ge=0, default=0)
    corrupt_lines: list[int] = Field(default_factory=list)
    read_error: str | None = None

    @property
    def clean(self) -> bool:
        return not self.corrupt_lines and self.read_error is None


class HistoryStore(ABC):
    """Abstract interface for the tool-call history."""

    @abstractmethod
    def append(self, call: ToolCall) -> CallRecord:
        """Assign the next sequence id, persist, and retain the call."""

    @abstractmethod
    def snapshot(self) -> tuple[CallRecord, ...]:
        """Return the retained records in ascending sequence order."""

    @abstractmethod
    def load(self, strict: bool = False) -> LoadReport:
        """Rebuild in-memory state from the persisted log."""

    @abstractmethod
    def compact(self) -> int:
        """Shrink the persisted log to the retained window."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying log."""

    def __len__(self) -> int:
        return len(self.snapshot())

    def __enter__(self) -> HistoryStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class JsonlHistoryStore(HistoryStore):
    """History persisted as one JSON record per line.

    Every appended record stays on disk; only the most recent ``max_entries``
    are kept in memory and visible to snapshots. The retained window is an
    immutable tuple swapped on each append, so readers never wait on the
    writer lock. With ``path=None`` the store is memory-only.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        *,
        durable: bool = True,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._path = Path(path) if path is not None else None
        self._max_entries = max_entries
        self._durable = durable
        self._lock = threading.Lock()
        self._records: tuple[CallRecord, ...] = ()
        self._next_seq = 1
        self._handle: FileIO | None = None
        self._needs_newline = False
        self._closed = False
        self._last_load = LoadReport()
        self.load()

    @classmethod
    def from_settings(cls, settings: IntrospectSettings) -> JsonlHistoryStore:
        """Open the store at the configured history path."""
        return cls(
            settings.history_path,
            max_entries=settings.max_entries,
            durable=settings.durable_writes,
        )

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def next_sequence_id(self) -> int:
        return self._next_seq

    @property
    def last_load(self) -> LoadReport:
        return self._last_load

    def snapshot(self) -> tuple[CallRecord, ...]:
        return self._records

    def append(self, call: ToolCall) -> CallRecord:
        """Append a call. Raises PersistenceError if the durable write fails.

        A failed write leaves both the log and the in-memory window unchanged
        and does not consume a sequence id.
        """
        with self._lock:
            if self._closed:
                raise PersistenceError("History store is closed")
            record = CallRecord(
                sequence_id=self._next_seq,
                category=call.category or categorize(call.tool_name).value,
                **call.model_dump(exclude={"category"}),
            )
            if self._path is not None:
                self._persist(record)

            retained = self._records + (record,)
            if len(retained) > self._max_entries:
                retained = retained[len(retained) - self._max_entries :]
            self._records = retained
            self._next_seq += 1
            return record

    def load(self, strict: bool = False) -> LoadReport:
        """Rebuild the retained window from the log.

        Corrupt lines are logged and skipped; every valid record is kept.
        With ``strict=True`` the first corruption (or a read failure) is
        raised after the valid records have been installed.
        """
        with self._lock:
            report = LoadReport()
            if self._path is None or not self._path.exists():
                self._last_load = report
                return report

            retained: deque[CallRecord] = deque(maxlen=self._max_entries)
            last_seq = 0
            ends_with_newline = True
            first_error: CorruptHistoryError | None = None
            read_exc: OSError | None = None

            try:
                with self._path.open("rb") as fh:
                    for line_number, raw in enumerate(fh, start=1):
                        report.lines_read += 1
                        ends_with_newline = raw.endswith(b"\n")
                        if not raw.strip():
                            continue
                        try:
                            record = CallRecord.model_validate_json(raw)
                        except ValidationError as exc:
                            error = CorruptHistoryError(
                                f"{self._path}:{line_number}: unparsable record "
                                f"({exc.error_count()} error(s))",
                                line_number=line_number,
                            )
                        else:
                            if record.sequence_id > last_seq:
                                last_seq = record.sequence_id
                                retained.append(record)
                                report.records_loaded += 1
                                continue
                            error = CorruptHistoryError(
                                f"{self._path}:{line_number}: sequence_id "
                                f"{record.sequence_id} does not follow {last_seq}",
                                line_number=line_number,
                            )
                        logger.warning("Skipping corrupt history line: %s", error)
                        report.corrupt_lines.append(line_number)
                        if first_error is None:
                            first_error = error
            except OSError as exc:
                logger.error("Failed to read history log %s: %s", self._path, exc)
                report.read_error = str(exc)
                read_exc = exc

            self._records = tuple(retained)
            self._next_seq = max(self._next_seq, last_seq + 1)
            self._needs_newline = report.lines_read > 0 and not ends_with_newline
            report.records_retained = len(self._records)
            self._last_load = report

        if report.records_loaded:
            logger.info(
                "Loaded %d tool call(s) from %s (%d retained, %d corrupt line(s) skipped)",
                report.records_loaded,
                self._path,
                report.records_retained,
                len(report.corrupt_lines),
            )
        if strict:
            if read_exc is not None:
                raise PersistenceError(
                    f"Failed to read history log {self._path}: {read_exc}"
                ) from read_exc
            if first_error is not None:
                raise first_error
        return report

    def compact(self) -> int:
        """Rewrite the log so it holds only the retained window.

        Returns the number of records written. The replacement is atomic;
        on failure the original log is left in place.
        """
        with self._lock:
            records = self._records
            if self._path is None:
                return len(records)
            tmp_path = self._path.with_name(self._path.name + ".tmp")
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with tmp_path.open("wb") as fh:
                    for record in records:
                        fh.write(record.model_dump_json().encode("utf-8") + b"\n")
                    fh.flush()
                    os.fsync(fh.fileno())
                if self._handle is not None:
                    self._handle.close()
                    self._handle = None
                os.replace(tmp_path, self._path)
            except OSError as exc:
                tmp_path.unlink(missing_ok=True)
                raise PersistenceError(
                    f"Failed to compact history log {self._path}: {exc}"
                ) from exc
            self._needs_newline = False
        logger.info("Compacted %s to %d record(s)", self._path, len(records))
        return len(records)

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None
            self._closed = True

    # ── Internals ──────────────────────────────────────────────────

    def _open_handle(self) -> FileIO:
        if self._handle is None:
            assert self._path is not None
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = FileIO(self._path, "ab")
        return self._handle

    def _persist(self, record: CallRecord) -> None:
        data = record.model_dump_json().encode("utf-8") + b"\n"
        if self._needs_newline:
            data = b"\n" + data
        try:
            handle = self._open_handle()
            position = os.fstat(handle.fileno()).st_size
        except OSError as exc:
            raise PersistenceError(
                f"Cannot open history log {self._path}: {exc}"
            ) from exc

        try:
            view = memoryview(data)
            while view:
                written = handle.write(view)
                view = view[written:]
            if self._durable:
                os.fsync(handle.fileno())
        except OSError as exc:
            logger.error(
                "Failed to persist tool call %d to %s: %s",
                record.sequence_id,
                self._path,
                exc,
            )
            self._rollback(handle, position)
            raise PersistenceError(
                f"Failed to persist tool call {record.sequence_id}: {exc}"
            ) from exc
        self._needs_newline = False

    def _rollback(self, handle: FileIO, position: int) -> None:
        try:
            handle.truncate(position)
        except OSError as exc:
            # The torn line will be skipped on load; start the next record fresh.
            logger.error("Could not roll back partial write in %s: %s", self._path, exc)
            self._needs_newline = True
