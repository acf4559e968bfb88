"""Turn caller input into a validated dispatch request.

Callers may pass a single message or a list of messages, either as
``Message`` models or as plain mappings shaped like the wire format.
Both shapes go through the same checks, in this order, and the first
violation wins:

1. ``sender`` and ``content`` are present
2. ``sender.id`` is present
3. ``type`` is present

Empty strings count as missing.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

import pydantic

from .errors import EmptyInputError, ValidationError
from .types import CallRequest, Message

MessageLike = Union[Message, Mapping[str, Any]]
MessagesInput = Union[MessageLike, Sequence[MessageLike]]


def _get(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def validate_message(message: Any, index: int | None = None) -> Message:
    """Check one message and return it as a ``Message`` model."""
    sender = _get(message, "sender")
    if not sender or not _get(message, "content"):
        raise ValidationError("Message must have both sender and content properties", index=index)
    if not _get(sender, "id"):
        raise ValidationError("Message sender must have an id property", index=index)
    if not _get(message, "type"):
        raise ValidationError("Message must have a type property", index=index)

    if isinstance(message, Message):
        return message
    try:
        return Message.model_validate(message)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid message: {e.errors()[0].get('msg')}", index=index) from e


def prepare_call_request(messages: MessagesInput) -> CallRequest:
    """Validate ``messages`` and wrap them in a ``CallRequest``.

    Raises:
        EmptyInputError: an empty list was given.
        ValidationError: a message is missing a required field, or the
            input is neither a message nor a list of messages.
    """
    if isinstance(messages, (Message, Mapping)):
        batch: list[Any] = [messages]
    elif isinstance(messages, (list, tuple)):
        if len(messages) == 0:
            raise EmptyInputError("messages list cannot be empty")
        batch = list(messages)
    else:
        raise ValidationError("messages must be a message or a list of messages")

    return CallRequest(messages=[validate_message(m, index=i) for i, m in enumerate(batch)])
