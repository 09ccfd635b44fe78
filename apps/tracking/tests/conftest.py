import pytest
from unittest.mock import Mock
from django.apps import apps as django_apps
from rest_framework.test import APIClient

from apps.tracking.services import StoreClient, StoreError


TRACKING_TOKEN = 'trk_9f8e7d6c5b4a39281706'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def tracking_config():
    return django_apps.get_app_config('tracking')


@pytest.fixture
def store(monkeypatch, tracking_config):
    """Replace the app's store client with a mock."""
    mock_store = Mock(spec=StoreClient)
    monkeypatch.setattr(tracking_config, 'store', mock_store)
    return mock_store


@pytest.fixture
def strict_actions(monkeypatch, tracking_config):
    """Enable strict action routing."""
    monkeypatch.setattr(tracking_config, 'strict_actions', True)


@pytest.fixture
def token():
    return TRACKING_TOKEN


@pytest.fixture
def order_snapshot():
    """A snapshot as returned by get_order_by_token."""
    return {
        'order_number': 'AX-1042',
        'status': 'quote_pending',
        'device': {'brand': 'Apple', 'model': 'iPhone 13'},
        'quote': {
            'total': 89990,
            'currency': 'CLP',
            'items': [
                {'description': 'Screen replacement', 'price': 79990},
                {'description': 'Diagnostics', 'price': 10000},
            ],
        },
        'workshop': {'name': 'Taller Centro', 'phone': '+56 9 1234 5678'},
    }


@pytest.fixture
def store_error():
    return StoreError('get_order_by_token', 'invalid input syntax')
