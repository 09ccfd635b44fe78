"""Tests for project-level endpoints and error handlers."""
from rest_framework import status


class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_health_check(self, client):
        response = client.get('/api/health/')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok'}


class TestErrorHandlers:

    def test_unknown_url_returns_json_404(self, client):
        response = client.get('/api/unknown/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Not found'}
