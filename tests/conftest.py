"""Shared fixtures: API clients and users."""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    from dashboard_api.models import User
    return User.objects.create_user(email='trader@example.com', password='Secret123', name='Trader')


@pytest.fixture
def other_user(db):
    from dashboard_api.models import User
    return User.objects.create_user(email='investor@example.com', password='Secret123', name='Investor')


@pytest.fixture
def auth_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client
