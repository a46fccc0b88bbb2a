"""Tests for the loguru sink setup."""

from unittest.mock import MagicMock

from src.config import LOGS_DIR
from src.utils import logger as logger_module


def test_console_only_in_tests(monkeypatch):
    fake = MagicMock()
    monkeypatch.setattr(logger_module, 'logger', fake)

    assert logger_module.setup_logger(log_to_files=False) is fake
    fake.remove.assert_called_once()
    assert fake.add.call_count == 1


def test_file_sinks():
    sinks = dict(logger_module.file_sinks())

    assert LOGS_DIR / 'ai.log' in sinks
    assert sinks[LOGS_DIR / 'errors.log']['level'] == 'ERROR'


def test_ai_log_keeps_only_gemini_calls():
    assert logger_module._is_ai_call({'message': 'Gemini chat request'})
    assert not logger_module._is_ai_call({'message': 'Fetched quote for TCS.NS'})


def test_market_data_log_filter():
    assert logger_module._is_quote_provider({'name': 'src.data.market_data'})
    assert not logger_module._is_quote_provider({'name': 'src.data.news'})
