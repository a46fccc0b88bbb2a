"""API tests for the generative AI endpoints."""

from unittest.mock import MagicMock, patch

import pytest

from src.config import config
from src.llm.analyst import StockAnalyst
from src.llm.llm_client import LLMError

pytestmark = pytest.mark.django_db

STOCK = {'symbol': 'TCS', 'price': 3500, 'change_percent': 1.2, 'pe': 29}


def analyst_patch(analyst):
    return patch('dashboard_api.views.ai.get_stock_analyst', return_value=analyst)


def fake_llm(text=None, json_data=None):
    llm = MagicMock()
    llm.generate_text.return_value = text
    llm.generate_json.return_value = json_data
    return llm


def test_missing_api_key_is_500(api_client, monkeypatch):
    monkeypatch.setattr(config.gemini, 'api_key', '')

    response = api_client.post('/api/ai/chat', {'message': 'Is TCS a buy?'})

    assert response.status_code == 500
    assert response.json() == {'error': 'AI service not configured'}


def test_model_failure_is_500(api_client):
    llm = MagicMock()
    llm.generate_text.side_effect = LLMError('quota exceeded')

    with analyst_patch(StockAnalyst(llm_client=llm)):
        response = api_client.post('/api/ai/chat', {'message': 'hello'})

    assert response.status_code == 500
    assert response.json()['details'] == 'quota exceeded'


class TestChat:
    def test_chat(self, api_client):
        llm = fake_llm(text='TCS looks fairly valued.')

        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/chat', {
                'message': 'Is TCS a buy?',
                'stock_data': STOCK,
                'context': [{'role': 'user', 'content': 'Hi'}],
            })

        assert response.status_code == 200
        assert response.json()['response'] == 'TCS looks fairly valued.'
        prompt = llm.generate_text.call_args.args[0]
        assert 'Is TCS a buy?' in prompt
        assert 'User: Hi' in prompt

    def test_chat_requires_message(self, api_client):
        response = api_client.post('/api/ai/chat', {})
        assert response.status_code == 400
        assert response.json() == {'error': 'Message is required'}


class TestCompare:
    def test_compare(self, api_client):
        llm = fake_llm(json_data={'summary': 'INFY is cheaper'})
        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/compare', {
                'stocks': [STOCK, {'symbol': 'INFY', 'price': 1500}],
            })

        assert response.status_code == 200
        body = response.json()
        assert body['comparison'] == {'summary': 'INFY is cheaper'}
        assert body['stocks'] == ['TCS', 'INFY']

    def test_compare_needs_two_stocks(self, api_client):
        response = api_client.post('/api/ai/compare', {'stocks': [STOCK]})
        assert response.status_code == 400


class TestDeepAnalysisAndRisk:
    def test_deep_analysis_passes_raw_text_through(self, api_client):
        llm = fake_llm(json_data={'raw_text': 'Not JSON at all'})
        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/deep-analysis', {
                'symbol': 'TCS', 'stock_data': STOCK, 'news_data': {'sentiment': 'positive', 'score': 7},
            })

        assert response.status_code == 200
        assert response.json()['analysis'] == {'raw_text': 'Not JSON at all'}
        assert 'Recent news sentiment: positive (7/10)' in llm.generate_json.call_args.args[0]

    def test_deep_analysis_requires_stock_data(self, api_client):
        response = api_client.post('/api/ai/deep-analysis', {'symbol': 'TCS'})
        assert response.status_code == 400

    def test_risk_score(self, api_client):
        llm = fake_llm(json_data={'overall_risk_score': 35, 'risk_level': 'Low'})
        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/risk-score', {'symbol': 'TCS', 'stock_data': STOCK})

        assert response.status_code == 200
        assert response.json()['risk_analysis']['risk_level'] == 'Low'

    def test_risk_score_requires_symbol(self, api_client):
        response = api_client.post('/api/ai/risk-score', {'stock_data': STOCK})
        assert response.status_code == 400


class TestPortfolioAdvice:
    def test_portfolio_advice_total_value(self, api_client):
        llm = fake_llm(json_data={'action_plan': 'Add pharma exposure'})
        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/portfolio-advice', {
                'portfolio': [
                    {'symbol': 'TCS', 'price': 3500, 'quantity': 2},
                    {'symbol': 'ITC', 'price': 400},
                ],
                'risk_profile': 'Conservative',
            })

        assert response.status_code == 200
        body = response.json()
        assert body['total_value'] == 7400.0
        assert body['advice'] == {'action_plan': 'Add pharma exposure'}

    def test_portfolio_required(self, api_client):
        response = api_client.post('/api/ai/portfolio-advice', {'portfolio': []})
        assert response.status_code == 400


class TestMalformedInput:
    def test_compare_rejects_bare_symbols(self, api_client):
        llm = fake_llm(json_data={'summary': 'n/a'})
        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/compare', {'stocks': ['TCS', 'INFY']})

        assert response.status_code == 400
        assert 'error' in response.json()
        llm.generate_json.assert_not_called()

    @pytest.mark.parametrize('holding', [
        {'symbol': 'TCS', 'price': 'abc'},
        {'symbol': 'TCS', 'price': 3500, 'quantity': 'two'},
        {'symbol': 'TCS', 'price': 'NaN'},
    ])
    def test_portfolio_rejects_unparseable_numbers(self, api_client, holding):
        llm = fake_llm(json_data={})
        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/portfolio-advice', {'portfolio': [holding]})

        assert response.status_code == 400
        assert response.json()['error'] == 'Invalid price or quantity for TCS'

    def test_portfolio_rejects_non_object_holdings(self, api_client):
        response = api_client.post('/api/ai/portfolio-advice', {'portfolio': ['TCS']})
        assert response.status_code == 400

    def test_chat_rejects_string_stock_data(self, api_client):
        response = api_client.post('/api/ai/chat', {'message': 'hi', 'stock_data': 'TCS'})
        assert response.status_code == 400

    def test_deep_analysis_rejects_string_stock_data(self, api_client):
        response = api_client.post('/api/ai/deep-analysis', {'symbol': 'TCS', 'stock_data': 'TCS'})
        assert response.status_code == 400

    def test_unexpected_failure_is_json_500(self, api_client):
        llm = MagicMock()
        llm.generate_json.side_effect = RuntimeError('socket closed')

        with analyst_patch(StockAnalyst(llm_client=llm)):
            response = api_client.post('/api/ai/risk-score', {'symbol': 'TCS', 'stock_data': STOCK})

        assert response.status_code == 500
        assert response.json() == {'error': 'Failed to calculate risk score'}
