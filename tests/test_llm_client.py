"""Tests for the Gemini client and the stock analyst."""

from unittest.mock import MagicMock, patch

import pytest

from src.config import config
from src.llm.analyst import StockAnalyst, portfolio_value
from src.llm.llm_client import (
    LLMClient,
    LLMError,
    LLMNotConfiguredError,
    parse_json_response,
    strip_code_fences,
)
from src.llm.prompts import build_category_chat_prompt, build_compare_prompt


def gemini_returning(text=None, error=None):
    client = MagicMock()
    if error is not None:
        client.models.generate_content.side_effect = error
    else:
        client.models.generate_content.return_value = MagicMock(text=text)
    return client


class TestResponseParsing:
    def test_strip_code_fences(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
        assert strip_code_fences('  plain  ') == 'plain'

    def test_parse_fenced_json(self):
        assert parse_json_response('```json\n{"overall_rating": "BUY"}\n```') == {'overall_rating': 'BUY'}

    def test_invalid_json_falls_back_to_raw_text(self):
        assert parse_json_response('Looks bullish overall.') == {'raw_text': 'Looks bullish overall.'}

    def test_non_object_json_falls_back_to_raw_text(self):
        assert parse_json_response('[1, 2]') == {'raw_text': '[1, 2]'}


class TestLLMClient:
    def test_requires_api_key(self, monkeypatch):
        monkeypatch.setattr(config.gemini, 'api_key', '')
        with pytest.raises(LLMNotConfiguredError):
            LLMClient()

    @patch('src.llm.llm_client.genai.Client')
    def test_generate_text_calls_model_once(self, mock_client_cls):
        mock_client_cls.return_value = gemini_returning('Hold for now.')

        client = LLMClient(api_key='test-key')
        assert client.generate_text('Should I buy TCS?') == 'Hold for now.'

        mock_client_cls.assert_called_once_with(api_key='test-key')
        generate = mock_client_cls.return_value.models.generate_content
        assert generate.call_count == 1
        assert generate.call_args.kwargs['contents'] == 'Should I buy TCS?'
        assert generate.call_args.kwargs['model'] == config.gemini.model

    @patch('src.llm.llm_client.genai.Client')
    def test_generate_json(self, mock_client_cls):
        mock_client_cls.return_value = gemini_returning('```json\n{"risk_level": "Low"}\n```')
        assert LLMClient(api_key='test-key').generate_json('risk?') == {'risk_level': 'Low'}

    @patch('src.llm.llm_client.genai.Client')
    def test_api_failure_raises_without_retry(self, mock_client_cls):
        mock_client_cls.return_value = gemini_returning(error=RuntimeError('quota exceeded'))

        client = LLMClient(api_key='test-key')
        with pytest.raises(LLMError):
            client.generate_text('hello')

        assert client.last_error == 'quota exceeded'
        assert mock_client_cls.return_value.models.generate_content.call_count == 1

    @patch('src.llm.llm_client.genai.Client')
    def test_empty_response_raises(self, mock_client_cls):
        mock_client_cls.return_value = gemini_returning('')
        with pytest.raises(LLMError):
            LLMClient(api_key='test-key').generate_text('hello')


class TestStockAnalyst:
    def test_portfolio_value_defaults_quantity_to_one(self):
        assert portfolio_value([{'price': 100, 'quantity': 2}, {'price': 50.5}]) == 250.5
        assert portfolio_value([]) == 0.0

    def test_portfolio_advice_adds_total_value(self):
        llm = MagicMock()
        llm.generate_json.return_value = {'action_plan': 'Diversify'}

        advice = StockAnalyst(llm_client=llm).portfolio_advice(
            [{'symbol': 'ITC', 'price': 400, 'quantity': 10}], risk_profile='Aggressive'
        )

        assert advice == {'action_plan': 'Diversify', 'total_value': 4000.0}
        prompt = llm.generate_json.call_args.args[0]
        assert 'Aggressive' in prompt
        assert '₹4,000.00' in prompt

    def test_compare_prompt_lists_every_stock(self):
        prompt = build_compare_prompt([{'symbol': 'TCS', 'price': 1}, {'symbol': 'INFY', 'price': 2}])
        assert 'STOCK 1: TCS' in prompt
        assert 'STOCK 2: INFY' in prompt
        assert '"final_verdict"' in prompt

    def test_category_chat_prompt_without_details_lists_symbols(self):
        prompt = build_category_chat_prompt('Which to buy?', 'Banking', stocks=['SBIN', 'PNB'])
        assert 'Stocks: SBIN, PNB' in prompt
        assert 'Which to buy?' in prompt
