"""
Event Listener Utilities

Provides reusable filters for Slack Events API callbacks. Only plain messages
authored by a person are candidates for draft announcements.
"""
import logging
from typing import Callable

from models.slack import SlackEvent

logger = logging.getLogger(f'{__name__}.event_filters')


def should_ignore_non_messages(event: SlackEvent) -> bool:
    """
    Check if event should be ignored because it is not a message.

    Args:
        event: Slack event object

    Returns:
        bool: True if event should be ignored (type is not 'message')
    """
    return event.type != 'message'


def should_ignore_subtyped_messages(event: SlackEvent) -> bool:
    """
    Check if event should be ignored because it carries a subtype.

    Edits, deletions, joins and bot posts all arrive as subtyped messages.

    Args:
        event: Slack event object

    Returns:
        bool: True if event should be ignored (any subtype present)
    """
    return bool(event.subtype)


def should_ignore_bot_messages(event: SlackEvent) -> bool:
    """
    Check if event should be ignored because it was posted by a bot.

    Args:
        event: Slack event object

    Returns:
        bool: True if event should be ignored (bot_id present)
    """
    return bool(event.bot_id)


def should_ignore_empty_messages(event: SlackEvent) -> bool:
    """
    Check if event should be ignored because it has no text.

    Args:
        event: Slack event object

    Returns:
        bool: True if event should be ignored (no text)
    """
    return not event.text


def should_process_event(
    event: SlackEvent,
    *filters: Callable[[SlackEvent], bool]
) -> bool:
    """
    Check if an event should be processed based on provided filters.

    Args:
        event: Slack event object
        *filters: Variable number of filter functions that return True if event should be ignored

    Returns:
        bool: True if event should be processed (all filters returned False),
              False if event should be ignored (any filter returned True)

    Example:
        if should_process_event(event, *DRAFT_MESSAGE_FILTERS):
            # Parse the message
            pass
    """
    for filter_func in filters:
        if filter_func(event):
            logger.debug(f"Event ignored by {filter_func.__name__}")
            return False

    return True


DRAFT_MESSAGE_FILTERS = (
    should_ignore_non_messages,
    should_ignore_subtyped_messages,
    should_ignore_bot_messages,
    should_ignore_empty_messages,
)
"""Draft filters: plain, human-authored messages with text."""
