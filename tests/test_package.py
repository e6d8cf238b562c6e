"""Tests for the package surface: exports, bundled docs and logging."""

import pytest
from loguru import logger

import timerange
from timerange import Interval, InvalidArgument, merge_overlap, split_range


def test_public_exports() -> None:
    for name in timerange.__all__:
        assert hasattr(timerange, name)


def test_docs_are_bundled() -> None:
    assert set(timerange.docs) == {"readme", "api"}
    assert "merge_overlap" in timerange.docs["api"]


@pytest.fixture
def records():
    captured: list[str] = []
    logger.enable("timerange")
    sink_id = logger.add(lambda message: captured.append(message), level="DEBUG")
    yield captured
    logger.remove(sink_id)
    logger.disable("timerange")


def test_logging_is_silent_by_default() -> None:
    captured: list[str] = []
    sink_id = logger.add(lambda message: captured.append(message), level="DEBUG")
    try:
        merge_overlap([Interval(start=0, end=1)])
    finally:
        logger.remove(sink_id)
    assert captured == []


def test_operations_log_when_enabled(records) -> None:
    merge_overlap([Interval(start=0, end=5), Interval(start=3, end=8)])
    split_range(Interval(start=0, end=10), 2)

    assert any("Merged 2 intervals into 1" in record for record in records)
    assert any("into 2 pieces" in record for record in records)


def test_rejections_are_logged(records) -> None:
    with pytest.raises(InvalidArgument):
        split_range(Interval(start=0, end=10), 0)

    assert any("Rejected parameter chunks" in record for record in records)
