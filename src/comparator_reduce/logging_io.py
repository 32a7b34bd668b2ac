"""Run log persistence."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Sequence

from .schemas import ReductionRecord
from .utils import append_jsonl, load_json, timestamp

LOG_DIR = Path("logs")


def _run_log_path(log_dir: Path) -> Path:
    today = datetime.now(timezone.utc).strftime("%Y%m%d")
    return log_dir / f"runs_{today}.jsonl"


def log_reduction(
    *,
    comparator: str,
    items: Sequence[Any],
    result: Any,
    index: int,
    log_dir: Path | None = None,
) -> Path:
    """Append a reduction run to today's run log."""

    record = ReductionRecord(
        timestamp=timestamp(),
        comparator=comparator,
        items=list(items),
        result=result,
        index=index,
    )
    path = _run_log_path(log_dir or LOG_DIR)
    append_jsonl(path, record.model_dump())
    return path


def load_reductions(log_dir: Path | None = None) -> List[ReductionRecord]:
    """Load every logged reduction, oldest log file first."""

    records: List[ReductionRecord] = []
    for log_file in sorted((log_dir or LOG_DIR).glob("runs_*.jsonl")):
        records.extend(ReductionRecord(**raw) for raw in load_json(log_file))
    return records


__all__ = ["LOG_DIR", "log_reduction", "load_reductions"]
