"""Order tracking service - snapshot lookup, quote decisions and questions."""

import logging
from typing import Any

from django.db import models

from .store import StoreClient
from .exceptions import (
    StoreError,
    InvalidTrackingTokenError,
    OrderNotFoundError,
    DecisionFailedError,
    QuoteNotPendingError,
    EmptyQuestionError,
    QuestionFailedError,
)

logger = logging.getLogger(__name__)


class QuoteDecision(models.TextChoices):
    APPROVE = 'approve', 'Approve'
    REJECT = 'reject', 'Reject'


DECISION_FAILED_MESSAGES = {
    QuoteDecision.APPROVE: 'Could not approve the quote',
    QuoteDecision.REJECT: 'Could not reject the quote',
}


def token_prefix(token: str) -> str:
    """Shorten a token for log lines."""
    return f"{token[:8]}..." if len(token) > 8 else token


def _is_empty(payload: Any) -> bool:
    return payload is None or payload is False or payload in ('', [], {})


def fetch_order_snapshot(*, store: StoreClient, token: str) -> Any:
    """
    Fetch the public snapshot of the order a token points at.

    Args:
        store: Store client
        token: Tracking token from the URL

    Returns:
        The store's payload, unmodified

    Raises:
        InvalidTrackingTokenError: If the store call fails
        OrderNotFoundError: If the store returns nothing
    """
    try:
        snapshot = store.lookup(token)
    except StoreError as e:
        logger.error("Order lookup failed for token %s: %s", token_prefix(token), e)
        raise InvalidTrackingTokenError() from e

    if _is_empty(snapshot):
        raise OrderNotFoundError()

    return snapshot


def decide_quote(*, store: StoreClient, token: str, decision: str) -> QuoteDecision:
    """
    Approve or reject the quote pending on an order.

    The store decides whether a quote is still awaiting a decision; a second
    decision on the same token comes back falsy and is reported as
    QuoteNotPendingError rather than as a fresh success.

    Args:
        store: Store client
        token: Tracking token from the URL
        decision: 'approve' or 'reject'

    Returns:
        The applied decision

    Raises:
        ValueError: If decision is not a QuoteDecision value
        DecisionFailedError: If the store call fails
        QuoteNotPendingError: If the store applied nothing
    """
    decision = QuoteDecision(decision)

    if decision == QuoteDecision.APPROVE:
        procedure = store.approve_quote
    else:
        procedure = store.reject_quote

    try:
        applied = procedure(token)
    except StoreError as e:
        logger.error(
            "Quote %s failed for token %s: %s",
            decision.value, token_prefix(token), e,
        )
        raise DecisionFailedError(DECISION_FAILED_MESSAGES[decision]) from e

    if not applied:
        logger.info(
            "Quote %s not applied for token %s (missing or already processed)",
            decision.value, token_prefix(token),
        )
        raise QuoteNotPendingError()

    logger.info("Quote %s applied for token %s", decision.value, token_prefix(token))
    return decision


def submit_quote_question(*, store: StoreClient, token: str, question: str) -> Any:
    """
    Attach a customer question to the quote on an order.

    Raises:
        EmptyQuestionError: If the question is blank (the store is not called)
        QuestionFailedError: If the store call fails
    """
    question = (question or '').strip()
    if not question:
        raise EmptyQuestionError()

    try:
        return store.add_quote_question(token, question)
    except StoreError as e:
        logger.error("Quote question failed for token %s: %s", token_prefix(token), e)
        raise QuestionFailedError() from e
