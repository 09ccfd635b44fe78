import logging

from django.apps import apps as django_apps
from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import tracking_exception_handler
from .serializers import (
    QuestionInputSerializer,
    DecisionResponseSerializer,
    ErrorResponseSerializer,
)
from .services import (
    QuoteDecision,
    fetch_order_snapshot,
    decide_quote,
    submit_quote_question,
    TokenRequiredError,
    InvalidActionError,
    InvalidTrackingTokenError,
    OrderNotFoundError,
    DecisionFailedError,
    QuoteNotPendingError,
    EmptyQuestionError,
    QuestionFailedError,
)
from .services.order_tracking import token_prefix

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
}

QUESTION_ACTION = 'question'


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    """Always answer with JSON, whatever the Accept header says."""

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class TrackingView(APIView):
    """
    Public tracking endpoint for one order, addressed by its tracking token.

    GET  /api/tracking/{token}/           - Order snapshot
    POST /api/tracking/{token}/approve/   - Approve the pending quote
    POST /api/tracking/{token}/reject/    - Reject the pending quote
    POST /api/tracking/{token}/question/  - Ask about the pending quote

    Any other method, and POST with an unknown action, answers with the
    order snapshot unless strict actions are enabled.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    renderer_classes = [JSONRenderer]
    parser_classes = [JSONParser]
    content_negotiation_class = IgnoreClientContentNegotiation

    # Overridable through as_view(); defaults come from the app config.
    store = None
    strict_actions = None

    def get_store(self):
        if self.store is not None:
            return self.store
        return django_apps.get_app_config('tracking').store

    def get_strict_actions(self) -> bool:
        if self.strict_actions is not None:
            return self.strict_actions
        return django_apps.get_app_config('tracking').strict_actions

    def get_exception_handler(self):
        return tracking_exception_handler

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        for header, value in CORS_HEADERS.items():
            response[header] = value
        return response

    def options(self, request, *args, **kwargs):
        """Answer CORS pre-flight requests."""
        return HttpResponse('ok', content_type='text/plain')

    def _require_token(self, token):
        if not token:
            raise TokenRequiredError()
        return token

    def _error(self, exc, status_code):
        return Response({'error': str(exc)}, status=status_code)

    @extend_schema(
        responses={
            200: OpenApiTypes.OBJECT,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Get the public snapshot of an order by its tracking token.",
        tags=['tracking'],
    )
    def get(self, request, token=None, action=None):
        """Get order snapshot - thin HTTP handler."""
        try:
            token = self._require_token(token)
            snapshot = fetch_order_snapshot(store=self.get_store(), token=token)
        except TokenRequiredError as e:
            return self._error(e, status.HTTP_400_BAD_REQUEST)
        except (InvalidTrackingTokenError, OrderNotFoundError) as e:
            return self._error(e, status.HTTP_404_NOT_FOUND)

        return Response(snapshot)

    @extend_schema(
        request=QuestionInputSerializer,
        responses={
            200: DecisionResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description=(
            "Approve or reject the pending quote, or send a question about it. "
            "Without a known action this returns the order snapshot."
        ),
        tags=['tracking'],
    )
    def post(self, request, token=None, action=None):
        """Dispatch a customer action on the order."""
        try:
            token = self._require_token(token)
        except TokenRequiredError as e:
            return self._error(e, status.HTTP_400_BAD_REQUEST)

        if action in QuoteDecision.values:
            return self._decide(token, action)

        if action == QUESTION_ACTION:
            return self._ask(request, token)

        if action and self.get_strict_actions():
            return self._error(InvalidActionError(), status.HTTP_400_BAD_REQUEST)

        if action:
            logger.warning(
                "Unknown tracking action %r for token %s, returning snapshot",
                action, token_prefix(token),
            )
        return self.get(request, token=token, action=action)

    def http_method_not_allowed(self, request, *args, **kwargs):
        # Non-write methods are all read as a snapshot request.
        return self.get(request, *args, **kwargs)

    def _decide(self, token, action):
        try:
            decision = decide_quote(store=self.get_store(), token=token, decision=action)
        except DecisionFailedError as e:
            return self._error(e, status.HTTP_400_BAD_REQUEST)
        except QuoteNotPendingError as e:
            return self._error(e, status.HTTP_404_NOT_FOUND)

        return Response({'success': True, 'action': decision.value})

    def _ask(self, request, token):
        serializer = QuestionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = submit_quote_question(
                store=self.get_store(),
                token=token,
                question=serializer.validated_data['question'],
            )
        except (EmptyQuestionError, QuestionFailedError) as e:
            return self._error(e, status.HTTP_400_BAD_REQUEST)

        return Response(result)
