"""Services for order tracking business logic."""

from .exceptions import (
    StoreError,
    TrackingServiceError,
    TokenRequiredError,
    InvalidActionError,
    InvalidTrackingTokenError,
    OrderNotFoundError,
    DecisionFailedError,
    QuoteNotPendingError,
    EmptyQuestionError,
    QuestionFailedError,
)
from .store import StoreClient, StoreSettings
from .order_tracking import (
    QuoteDecision,
    fetch_order_snapshot,
    decide_quote,
    submit_quote_question,
)

__all__ = [
    # Exceptions
    'StoreError',
    'TrackingServiceError',
    'TokenRequiredError',
    'InvalidActionError',
    'InvalidTrackingTokenError',
    'OrderNotFoundError',
    'DecisionFailedError',
    'QuoteNotPendingError',
    'EmptyQuestionError',
    'QuestionFailedError',
    # Store
    'StoreClient',
    'StoreSettings',
    # Services
    'QuoteDecision',
    'fetch_order_snapshot',
    'decide_quote',
    'submit_quote_question',
]
