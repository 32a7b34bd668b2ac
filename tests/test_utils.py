from comparator_reduce import utils


def test_coerce_items_numbers() -> None:
    assert utils.coerce_items(["12", "2.5", "-3"]) == [12, 2.5, -3]


def test_coerce_items_keeps_text_when_any_token_is_a_word() -> None:
    assert utils.coerce_items(["3", "apple", "1.5"]) == ["3", "apple", "1.5"]


def test_jsonable_stringifies_wide_integers() -> None:
    record = {"items": [2**64, -(2**63), True], "result": 2**70}
    assert utils.jsonable(record) == {"items": [str(2**64), -(2**63), True], "result": str(2**70)}


def test_append_jsonl_writes_wide_integers(tmp_path) -> None:
    path = tmp_path / "runs.jsonl"
    utils.append_jsonl(path, {"value": 10**30})
    assert list(utils.load_json(path)) == [{"value": str(10**30)}]
