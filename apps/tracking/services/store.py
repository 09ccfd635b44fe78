"""
Client for the hosted store's remote procedures.

The store is a Supabase project; every procedure is reachable through
PostgREST at ``POST {url}/rest/v1/rpc/{function}`` with the parameters as a
JSON object. Calls use the service role key, so this client must only ever
run server side.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from django.core.exceptions import ImproperlyConfigured

from .exceptions import (
    StoreError,
    StoreConnectionError,
    StoreTimeoutError,
    StoreUnauthorizedError,
    StoreNotFoundError,
    StoreServerError,
    StoreInvalidResponseError,
)

logger = logging.getLogger(__name__)

# Remote procedure names
LOOKUP_ORDER = 'get_order_by_token'
APPROVE_QUOTE = 'approve_quote_from_tracking'
REJECT_QUOTE = 'reject_quote_from_tracking'
ADD_QUOTE_QUESTION = 'add_quote_question_from_tracking'

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class StoreSettings:
    """Connection settings for the store, built once at startup."""

    url: str
    service_key: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_django_settings(cls, settings) -> 'StoreSettings':
        return cls(
            url=getattr(settings, 'SUPABASE_URL', '') or '',
            service_key=getattr(settings, 'SUPABASE_SERVICE_ROLE_KEY', '') or '',
            timeout=getattr(settings, 'STORE_TIMEOUT', DEFAULT_TIMEOUT_SECONDS),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.service_key)

    @property
    def rpc_base_url(self) -> str:
        return f"{self.url.rstrip('/')}/rest/v1/rpc"


class StoreClient:
    """
    Thin wrapper over the store's RPC endpoints.

    Every call either returns the decoded JSON result (``None`` for an empty
    body) or raises a ``StoreError`` subclass. No retries are attempted.
    """

    def __init__(self, settings: StoreSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session if session is not None else requests.Session()

    def _headers(self) -> dict:
        return {
            'apikey': self.settings.service_key,
            'Authorization': f'Bearer {self.settings.service_key}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }

    def rpc(self, function: str, params: dict) -> Any:
        """
        Invoke a remote procedure.

        Args:
            function: Procedure name
            params: Named procedure arguments

        Returns:
            Decoded JSON result, or None when the body is empty

        Raises:
            ImproperlyConfigured: If the store URL or key is missing
            StoreError: If the call fails (see subclasses)
        """
        if not self.settings.is_configured:
            raise ImproperlyConfigured(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set"
            )

        url = f"{self.settings.rpc_base_url}/{function}"
        try:
            response = self.session.post(
                url,
                json=params,
                headers=self._headers(),
                timeout=self.settings.timeout,
            )
        except requests.Timeout as e:
            raise StoreTimeoutError(function, str(e)) from e
        except requests.ConnectionError as e:
            raise StoreConnectionError(function, str(e)) from e
        except requests.RequestException as e:
            raise StoreError(function, str(e)) from e

        if response.status_code >= 400:
            raise self._error_for_status(function, response)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise StoreInvalidResponseError(function, 'response is not JSON') from e

    @staticmethod
    def _error_for_status(function: str, response: requests.Response) -> StoreError:
        """Classify an HTTP error response from PostgREST."""
        detail = _error_detail(response)
        if response.status_code in (401, 403):
            return StoreUnauthorizedError(function, detail)
        if response.status_code == 404:
            return StoreNotFoundError(function, detail)
        return StoreServerError(function, response.status_code, detail)

    # Typed procedure wrappers

    def lookup(self, token: str) -> Any:
        """Return the order snapshot for a tracking token, or None."""
        return self.rpc(LOOKUP_ORDER, {'p_token': token})

    def approve_quote(self, token: str) -> Any:
        """Approve the pending quote; falsy when nothing was pending."""
        return self.rpc(APPROVE_QUOTE, {'p_order_token': token})

    def reject_quote(self, token: str) -> Any:
        """Reject the pending quote; falsy when nothing was pending."""
        return self.rpc(REJECT_QUOTE, {'p_order_token': token})

    def add_quote_question(self, token: str, question: str) -> Any:
        return self.rpc(ADD_QUOTE_QUESTION, {
            'p_order_token': token,
            'p_question': question,
        })


def _error_detail(response: requests.Response) -> str:
    # PostgREST error bodies look like {"code": ..., "message": ..., "details": ...}
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict):
        return str(body.get('message') or body.get('code') or '')
    return ''
