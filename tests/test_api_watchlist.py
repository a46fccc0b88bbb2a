"""API tests for the watchlist endpoints."""

from unittest.mock import MagicMock, patch

import pytest

from dashboard_api.models import Watchlist, WatchlistItem
from dashboard_api.services.watchlist import SESSION_KEY
from src.llm.llm_client import LLMNotConfiguredError
from tests.factories import FakeMarketClient, make_quote

pytestmark = pytest.mark.django_db


def add(client, symbol, **fields):
    return client.post('/api/watchlist', {'symbol': symbol, **fields})


class TestWatchlistCrud:
    def test_requires_login(self, api_client):
        response = api_client.get('/api/watchlist')
        assert response.status_code == 401
        assert 'error' in response.json()

    def test_get_creates_default_watchlist(self, auth_client, user):
        response = auth_client.get('/api/watchlist')

        assert response.status_code == 200
        body = response.json()['watchlist']
        assert body['name'] == 'My Watchlist'
        assert body['items'] == []
        assert Watchlist.objects.filter(user=user, is_default=True).count() == 1

        auth_client.get('/api/watchlist')
        assert Watchlist.objects.filter(user=user).count() == 1

    def test_add_item(self, auth_client):
        response = add(auth_client, 'reliance', added_price=2900.5, target_price='3200', notes='Long term')

        assert response.status_code == 201
        item = response.json()['item']
        assert item['symbol'] == 'RELIANCE'
        assert item['added_price'] == 2900.5
        assert item['target_price'] == 3200.0
        assert item['stop_loss'] is None
        assert item['notes'] == 'Long term'

    def test_add_requires_symbol(self, auth_client):
        response = auth_client.post('/api/watchlist', {})
        assert response.status_code == 400
        assert response.json() == {'error': 'Symbol is required'}

    def test_add_rejects_bad_price(self, auth_client):
        response = add(auth_client, 'TCS', target_price='lots')
        assert response.status_code == 400

    @pytest.mark.parametrize('price', ['NaN', 'Infinity', '-inf', '1e15'])
    def test_add_rejects_non_finite_or_oversized_price(self, auth_client, price):
        response = add(auth_client, 'INFY', target_price=price)

        assert response.status_code == 400
        assert response.json() == {'error': f'Invalid price: {price}'}
        assert not WatchlistItem.objects.exists()

    def test_exchange_suffix_is_dropped(self, auth_client):
        add(auth_client, 'infy.ns')
        response = add(auth_client, 'INFY.BO')

        assert response.status_code == 409
        assert list(WatchlistItem.objects.values_list('symbol', flat=True)) == ['INFY']

    def test_duplicate_is_409(self, auth_client):
        add(auth_client, 'TCS')
        response = add(auth_client, 'tcs')

        assert response.status_code == 409
        assert response.json()['error'] == 'Stock already in watchlist'

    def test_items_newest_first(self, auth_client):
        add(auth_client, 'TCS')
        add(auth_client, 'INFY')

        items = auth_client.get('/api/watchlist').json()['watchlist']['items']
        assert [item['symbol'] for item in items] == ['INFY', 'TCS']

    def test_patch_item(self, auth_client):
        add(auth_client, 'ITC')
        response = auth_client.patch('/api/watchlist/itc', {'stop_loss': 380, 'category': 'FMCG'})

        assert response.status_code == 200
        item = WatchlistItem.objects.get(symbol='ITC')
        assert float(item.stop_loss) == 380.0
        assert item.category == 'FMCG'

    def test_patch_missing_is_404(self, auth_client):
        response = auth_client.patch('/api/watchlist/NOPE', {'notes': 'x'})
        assert response.status_code == 404

    def test_patch_or_delete_without_watchlist_creates_nothing(self, auth_client, user):
        assert auth_client.patch('/api/watchlist/TCS', {'notes': 'x'}).status_code == 404
        assert auth_client.delete('/api/watchlist/TCS').status_code == 404
        assert not Watchlist.objects.filter(user=user).exists()

    def test_delete_item(self, auth_client):
        add(auth_client, 'SBIN')

        assert auth_client.delete('/api/watchlist/sbin').status_code == 200
        assert auth_client.delete('/api/watchlist/SBIN').status_code == 404

    def test_item_named_like_a_route_is_reachable_upper_case(self, auth_client):
        add(auth_client, 'GROUPS')

        assert auth_client.patch('/api/watchlist/GROUPS', {'notes': 'odd ticker'}).status_code == 200
        assert auth_client.delete('/api/watchlist/GROUPS').status_code == 200
        assert not WatchlistItem.objects.exists()

    def test_clear_without_watchlist_is_404(self, auth_client):
        response = auth_client.delete('/api/watchlist')
        assert response.status_code == 404
        assert response.json()['error'] == 'Watchlist not found'

    def test_clear(self, auth_client, user):
        add(auth_client, 'TCS')
        add(auth_client, 'INFY')

        response = auth_client.delete('/api/watchlist')

        assert response.status_code == 200
        assert not WatchlistItem.objects.filter(watchlist__user=user).exists()

    def test_users_do_not_share_items(self, auth_client, other_user):
        add(auth_client, 'TCS')
        auth_client.force_authenticate(user=other_user)

        items = auth_client.get('/api/watchlist').json()['watchlist']['items']
        assert items == []


class TestMigrate:
    def test_migrate_reports_each_symbol(self, auth_client):
        add(auth_client, 'TCS')

        response = auth_client.post('/api/watchlist/migrate', {'symbols': ['tcs', 'infy', '']})

        assert response.status_code == 200
        assert response.json()['results'] == [
            {'symbol': 'TCS', 'status': 'already_exists'},
            {'symbol': 'INFY', 'status': 'added'},
            {'symbol': '', 'status': 'error'},
        ]

    def test_migrate_from_session_clears_it(self, api_client, user):
        api_client.post('/api/watchlist/symbols', {'symbol': 'hdfcbank'})
        api_client.post('/api/watchlist/symbols', {'symbol': 'wipro'})

        api_client.force_authenticate(user=user)
        response = api_client.post('/api/watchlist/migrate', {})

        assert response.status_code == 200
        statuses = {r['symbol']: r['status'] for r in response.json()['results']}
        assert statuses == {'HDFCBANK': 'added', 'WIPRO': 'added'}
        assert SESSION_KEY not in api_client.session

    def test_migrate_rejects_non_list(self, auth_client):
        response = auth_client.post('/api/watchlist/migrate', {'symbols': 'TCS'})
        assert response.status_code == 400


class TestGroups:
    def test_groups_use_stored_or_derived_category(self, auth_client):
        add(auth_client, 'HDFCBANK')
        add(auth_client, 'TCS')
        add(auth_client, 'ZOMATO')
        add(auth_client, 'ITC', category='Favourites')

        response = auth_client.get('/api/watchlist/groups')

        body = response.json()
        assert body['categories'] == ['Banking', 'Favourites', 'Other', 'Technology']
        assert body['total_stocks'] == 4
        assert [item['symbol'] for item in body['grouped']['Banking']] == ['HDFCBANK']

    def test_groups_without_watchlist(self, auth_client):
        response = auth_client.get('/api/watchlist/groups')
        assert response.json() == {'grouped': {}, 'categories': [], 'total_stocks': 0}

    def test_auto_categorize(self, auth_client):
        add(auth_client, 'SUNPHARMA')
        add(auth_client, 'ITC', category='Favourites')

        response = auth_client.post('/api/watchlist/groups')

        assert response.json()['updated'] == 2
        assert WatchlistItem.objects.get(symbol='SUNPHARMA').category == 'Pharmaceuticals'
        assert WatchlistItem.objects.get(symbol='ITC').category == 'FMCG'

    def test_auto_categorize_without_watchlist_is_404(self, auth_client):
        assert auth_client.post('/api/watchlist/groups').status_code == 404


class TestCategoryAI:
    def test_analyze_category(self, auth_client):
        analyst = MagicMock()
        analyst.category_analysis.return_value = 'Banking looks strong.'
        market = FakeMarketClient({
            'HDFCBANK': make_quote('HDFCBANK', price=1600.0),
            'SBIN': make_quote('SBIN', price=800.0),
        })

        with patch('dashboard_api.views.watchlist.get_stock_analyst', return_value=analyst), \
                patch('dashboard_api.services.snapshots.get_market_data_client', return_value=lambda: market):
            response = auth_client.post('/api/watchlist/analyze-category', {
                'category': 'Banking',
                'stocks': [{'symbol': 'HDFCBANK'}, {'symbol': 'SBIN'}, {'symbol': 'GONE'}],
            })

        assert response.status_code == 200
        body = response.json()
        assert body['analysis'] == 'Banking looks strong.'
        assert body['stock_count'] == 3
        assert [d['current_price'] for d in body['stock_details']] == [1600.0, 800.0]
        category, details = analyst.category_analysis.call_args.args
        assert category == 'Banking'
        assert len(details) == 2

    def test_analyze_category_requires_input(self, auth_client):
        response = auth_client.post('/api/watchlist/analyze-category', {'category': 'Banking'})
        assert response.status_code == 400

    def test_analyze_category_without_ai_key(self, auth_client):
        with patch('dashboard_api.views.watchlist.get_stock_analyst',
                   side_effect=LLMNotConfiguredError('AI service not configured')):
            response = auth_client.post('/api/watchlist/analyze-category', {
                'category': 'Banking', 'stocks': [{'symbol': 'SBIN'}],
            })
        assert response.status_code == 500
        assert response.json()['error'] == 'AI service not configured'

    def test_chat_category(self, auth_client):
        analyst = MagicMock()
        analyst.category_chat.return_value = 'Buy SBIN below 780.'

        with patch('dashboard_api.views.watchlist.get_stock_analyst', return_value=analyst):
            response = auth_client.post('/api/watchlist/chat-category', {
                'message': 'What should I buy?',
                'category': 'Banking',
                'stocks': ['SBIN'],
            })

        assert response.status_code == 200
        assert response.json() == {'response': 'Buy SBIN below 780.', 'category': 'Banking'}
        assert analyst.category_chat.call_args.kwargs['stocks'] == ['SBIN']

    def test_chat_category_requires_message(self, auth_client):
        response = auth_client.post('/api/watchlist/chat-category', {'category': 'Banking'})
        assert response.status_code == 400


class TestSymbolsDualMode:
    def test_anonymous_list_lives_in_session(self, api_client):
        api_client.post('/api/watchlist/symbols', {'symbol': 'tcs'})
        api_client.post('/api/watchlist/symbols', {'symbol': 'infy'})
        response = api_client.post('/api/watchlist/symbols', {'symbol': 'TCS'})

        assert response.status_code == 200
        assert response.json() == {'symbols': ['INFY', 'TCS'], 'persistent': False}
        assert not WatchlistItem.objects.exists()

        response = api_client.delete('/api/watchlist/symbols/tcs')
        assert response.json()['symbols'] == ['INFY']

        response = api_client.delete('/api/watchlist/symbols')
        assert response.json()['symbols'] == []

    def test_signed_in_list_lives_in_database(self, auth_client, user):
        auth_client.post('/api/watchlist/symbols', {'symbol': 'tcs'})
        response = auth_client.post('/api/watchlist/symbols', {'symbol': 'tcs'})

        assert response.json() == {'symbols': ['TCS'], 'persistent': True}
        assert WatchlistItem.objects.filter(watchlist__user=user, symbol='TCS').count() == 1

        auth_client.delete('/api/watchlist/symbols/TCS')
        assert auth_client.get('/api/watchlist/symbols').json()['symbols'] == []

    def test_add_requires_symbol(self, api_client):
        assert api_client.post('/api/watchlist/symbols', {}).status_code == 400
