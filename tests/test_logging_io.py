from __future__ import annotations

from pathlib import Path

from comparator_reduce.logging_io import load_reductions, log_reduction


def test_log_reduction_round_trip(tmp_path: Path) -> None:
    path = log_reduction(comparator="min", items=[12, 2, 3, 4], result=2, index=1, log_dir=tmp_path)
    log_reduction(comparator="max", items=["b", "a"], result="b", index=0, log_dir=tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("runs_") and path.suffix == ".jsonl"
    assert len(path.read_text(encoding="utf-8").splitlines()) == 2

    records = load_reductions(tmp_path)
    assert [record.comparator for record in records] == ["min", "max"]
    assert records[0].items == [12, 2, 3, 4]
    assert records[0].result == 2
    assert records[0].index == 1
    assert records[1].result == "b"


def test_load_reductions_skips_blank_lines_and_orders_files(tmp_path: Path) -> None:
    older = tmp_path / "runs_20240101.jsonl"
    newer = tmp_path / "runs_20240102.jsonl"
    newer.write_text(
        '{"timestamp": "t2", "comparator": "max", "items": [1], "result": 1, "index": 0}\n',
        encoding="utf-8",
    )
    older.write_text(
        '\n{"timestamp": "t1", "comparator": "min", "items": [1], "result": 1, "index": 0}\n\n',
        encoding="utf-8",
    )
    (tmp_path / "unrelated.jsonl").write_text("not json\n", encoding="utf-8")

    records = load_reductions(tmp_path)
    assert [record.timestamp for record in records] == ["t1", "t2"]


def test_load_reductions_empty_directory(tmp_path: Path) -> None:
    assert load_reductions(tmp_path / "missing") == []
