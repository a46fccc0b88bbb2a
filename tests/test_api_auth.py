"""API tests for registration, login, logout and JWT refresh."""

import pytest

pytestmark = pytest.mark.django_db


def login(api_client, email='trader@example.com', password='Secret123'):
    return api_client.post('/auth/login', {'email': email, 'password': password})


class TestRegister:
    def test_register(self, api_client):
        response = api_client.post('/auth/register', {
            'email': 'New.User@Example.com', 'password': 'Passw0rdX',
        })

        assert response.status_code == 201
        body = response.json()
        assert body['user'] == {'email': 'new.user@example.com', 'name': 'new.user', 'authenticated': True}
        assert set(body['tokens']) == {'access', 'refresh'}

    @pytest.mark.parametrize('password', ['short1A', 'alllowercase1', 'ALLUPPERCASE1', 'NoDigitsHere'])
    def test_weak_password(self, api_client, password):
        response = api_client.post('/auth/register', {'email': 'a@example.com', 'password': password})
        assert response.status_code == 400

    def test_invalid_email(self, api_client):
        response = api_client.post('/auth/register', {'email': 'not-an-email', 'password': 'Passw0rdX'})
        assert response.json() == {'error': 'Invalid email address'}

    def test_duplicate_email(self, api_client, user):
        response = api_client.post('/auth/register', {'email': 'TRADER@example.com', 'password': 'Passw0rdX'})
        assert response.status_code == 409


class TestLogin:
    def test_login(self, api_client, user):
        response = login(api_client)

        assert response.status_code == 200
        assert response.json()['user']['email'] == 'trader@example.com'
        user.refresh_from_db()
        assert user.last_login is not None

    def test_wrong_password(self, api_client, user):
        response = login(api_client, password='Wrong123')
        assert response.status_code == 401
        assert response.json() == {'error': 'Invalid email or password'}

    def test_missing_fields(self, api_client):
        assert api_client.post('/auth/login', {}).status_code == 400

    def test_disabled_account(self, api_client, user):
        user.is_active = False
        user.save()
        assert login(api_client).status_code == 403


class TestTokens:
    def test_me_requires_token(self, api_client):
        response = api_client.get('/auth/me')
        assert response.status_code == 401
        assert 'error' in response.json()

    def test_me_with_access_token(self, api_client, user):
        access = login(api_client).json()['tokens']['access']

        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
        response = api_client.get('/auth/me')

        assert response.status_code == 200
        assert response.json()['name'] == 'Trader'

    def test_refresh(self, api_client, user):
        refresh = login(api_client).json()['tokens']['refresh']

        response = api_client.post('/auth/token/refresh', {'refresh': refresh})

        assert response.status_code == 200
        assert 'access' in response.json()

    def test_logout_blacklists_refresh_token(self, api_client, user):
        tokens = login(api_client).json()['tokens']
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = api_client.post('/auth/logout', {'refresh': tokens['refresh']})
        assert response.status_code == 200

        api_client.credentials()
        response = api_client.post('/auth/token/refresh', {'refresh': tokens['refresh']})
        assert response.status_code == 401

    def test_logout_with_garbage_token(self, auth_client):
        response = auth_client.post('/auth/logout', {'refresh': 'garbage'})
        assert response.status_code == 400
