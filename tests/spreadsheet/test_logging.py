"""Tests for package logging helpers."""

import logging

import pytest

from spreadsheet_converter import _logging


@pytest.fixture
def root_logger(monkeypatch):
    logger = logging.getLogger(_logging.ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    monkeypatch.setattr(_logging, "_HANDLER_ATTACHED", False)
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_get_logger_is_namespaced():
    assert _logging.get_logger("sheet").name == "spreadsheet_converter.sheet"


def test_configure_attaches_one_handler(root_logger):
    before = len(root_logger.handlers)
    _logging.configure_logging("INFO")
    _logging.configure_logging("DEBUG")

    assert len(root_logger.handlers) == before + 1
    assert root_logger.level == logging.DEBUG


def test_rejection_is_logged(caplog, make_storage):
    from spreadsheet_converter.config import ImportSettings
    from spreadsheet_converter.errors import HeaderShapeError
    from spreadsheet_converter.records import ParsedRow
    from spreadsheet_converter.spreadsheet import parse_spreadsheet

    class CodeRow(ParsedRow):
        code: str = ""

    with caplog.at_level(logging.WARNING, logger=_logging.ROOT_LOGGER_NAME):
        with pytest.raises(HeaderShapeError):
            parse_spreadsheet(make_storage([["Other"]]), {"code": 0}, CodeRow, settings=ImportSettings())

    assert "Spreadsheet rejected" in caplog.text
