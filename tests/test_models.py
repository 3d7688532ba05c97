"""Tests for the diff data models"""

import pytest
from pydantic import ValidationError

from models.diff import DiffRecord, DiffRequest, DiffResult, DiffType


def test_record_constructors_leave_missing_side_empty():
    assert DiffRecord.added("x", 3).old_line_num is None
    assert DiffRecord.removed("x", 3).new_line_num is None

    record = DiffRecord.unchanged("x", 2, 5)
    assert (record.old_line_num, record.new_line_num) == (2, 5)


def test_record_is_immutable():
    record = DiffRecord.added("x", 1)

    with pytest.raises(ValidationError):
        record.content = "y"


def test_record_serializes_with_camel_case_keys():
    record = DiffRecord.removed("old line", 4)

    assert record.model_dump(by_alias=True, mode="json") == {
        "type": "removed",
        "oldLineNum": 4,
        "newLineNum": None,
        "content": "old line",
    }


def test_record_accepts_aliases_and_field_names():
    by_alias = DiffRecord.model_validate(
        {"type": "added", "oldLineNum": None, "newLineNum": 7, "content": "z"}
    )
    by_name = DiffRecord(type=DiffType.ADDED, new_line_num=7, content="z")

    assert by_alias == by_name


def test_result_from_records_counts_types():
    records = [
        DiffRecord.unchanged("a", 1, 1),
        DiffRecord.removed("b", 2),
        DiffRecord.added("c", 2),
        DiffRecord.added("d", 3),
    ]

    result = DiffResult.from_records(records)

    assert (result.additions, result.deletions, result.unchanged) == (2, 1, 1)
    assert result.has_differences is True
    assert result.model_dump(by_alias=True)["hasDifferences"] is True


def test_result_from_unchanged_records_has_no_differences():
    result = DiffResult.from_records([DiffRecord.unchanged("", 1, 1)])
    assert result.has_differences is False


def test_request_defaults_to_empty_texts():
    request = DiffRequest.model_validate({"oldText": "a"})
    assert request.old_text == "a"
    assert request.new_text == ""


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "added", "oldLineNum": 3, "newLineNum": 1, "content": "x"},
        {"type": "added", "oldLineNum": None, "newLineNum": None, "content": "x"},
        {"type": "removed", "oldLineNum": 2, "newLineNum": 4, "content": "x"},
        {"type": "removed", "oldLineNum": None, "newLineNum": None, "content": "x"},
        {"type": "unchanged", "oldLineNum": 1, "newLineNum": None, "content": "x"},
        {"type": "unchanged", "oldLineNum": None, "newLineNum": 1, "content": "x"},
    ],
)
def test_record_rejects_line_numbers_for_the_wrong_side(payload):
    with pytest.raises(ValidationError):
        DiffRecord.model_validate(payload)
