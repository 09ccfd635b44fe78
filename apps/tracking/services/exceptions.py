"""
Domain exceptions for the tracking app.

Two families live here. ``StoreError`` and its subclasses describe what went
wrong talking to the hosted store; they carry backend detail and must never
reach an anonymous caller. ``TrackingServiceError`` and its subclasses are
the outcomes a customer may see; their message is the public error text.

Exception Hierarchy:
    StoreError (base)
    ├── StoreConnectionError
    ├── StoreTimeoutError
    ├── StoreUnauthorizedError
    ├── StoreNotFoundError
    ├── StoreServerError
    └── StoreInvalidResponseError

    TrackingServiceError (base)
    ├── TokenRequiredError
    ├── InvalidActionError
    ├── InvalidTrackingTokenError
    ├── OrderNotFoundError
    ├── DecisionFailedError
    ├── QuoteNotPendingError
    ├── EmptyQuestionError
    └── QuestionFailedError
"""


# =============================================================================
# STORE ERRORS
# =============================================================================

class StoreError(Exception):
    """Base exception for failed calls to the hosted store."""

    def __init__(self, function: str, detail: str = ''):
        self.function = function
        self.detail = detail
        message = f"{function}: {detail}" if detail else function
        super().__init__(message)


class StoreConnectionError(StoreError):
    """The store could not be reached."""


class StoreTimeoutError(StoreError):
    """The store did not answer within the configured timeout."""


class StoreUnauthorizedError(StoreError):
    """The store rejected the service credential (401/403)."""
    pass


class StoreNotFoundError(StoreError):
    """The remote procedure does not exist (404)."""
    pass


class StoreServerError(StoreError):
    """Any other HTTP error reported by the store."""

    def __init__(self, function: str, status_code: int, detail: str = ''):
        self.status_code = status_code
        super().__init__(function, f"HTTP {status_code} {detail}".strip())


class StoreInvalidResponseError(StoreError):
    """The store answered with a body that is not JSON."""
    pass


# =============================================================================
# TRACKING ERRORS
# =============================================================================

class TrackingServiceError(Exception):
    """
    Base exception for tracking outcomes shown to the customer.

    Views catch subclasses and return ``{'error': str(e)}``:

        try:
            snapshot = fetch_order_snapshot(store=store, token=token)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=404)
    """

    default_message = 'Tracking request failed'

    def __init__(self, message: str = ''):
        super().__init__(message or self.default_message)


class TokenRequiredError(TrackingServiceError):
    """The request path carries no tracking token."""
    default_message = 'Token is required'


class InvalidActionError(TrackingServiceError):
    """Unknown action in strict mode."""
    default_message = 'Invalid action'


class InvalidTrackingTokenError(TrackingServiceError):
    """The store failed to look the token up."""
    default_message = 'Invalid token'


class OrderNotFoundError(TrackingServiceError):
    """The lookup succeeded but returned nothing."""
    default_message = 'Order not found'


class DecisionFailedError(TrackingServiceError):
    """
    The store failed while applying an approve/reject decision.

    Example:
        raise DecisionFailedError("Could not approve the quote")
    """
    default_message = 'Could not process the quote decision'


class QuoteNotPendingError(TrackingServiceError):
    """
    The decision was not applied.

    Covers both an unknown token and a quote that was already decided; the
    store reports the two the same way.
    """
    default_message = 'Quote not found or already processed'


class EmptyQuestionError(TrackingServiceError):
    """Question text is missing or blank."""
    default_message = 'Question cannot be empty'


class QuestionFailedError(TrackingServiceError):
    """The store failed to record the question."""
    default_message = 'Could not send the question'
