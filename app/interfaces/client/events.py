"""Parsing of ``text/event-stream`` responses into decoded events."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any

logger = logging.getLogger(__name__)


async def parse_event_stream(lines: AsyncIterable[str]) -> AsyncIterator[dict[str, Any]]:
    """Yield the JSON payload of every event found in ``lines``.

    Consecutive ``data:`` lines are joined with newlines and dispatched on the
    blank line that ends the event. Comments and other fields are skipped, as
    are payloads that are not JSON objects.
    """

    data: list[str] = []
    async for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if not line:
            if data:
                event = _decode("\n".join(data))
                data = []
                if event is not None:
                    yield event
            continue
        if line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        if field != "data":
            continue
        data.append(value[1:] if value.startswith(" ") else value)

    if data:
        event = _decode("\n".join(data))
        if event is not None:
            yield event


def _decode(payload: str) -> dict[str, Any] | None:
    try:
        event = json.loads(payload)
    except json.JSONDecodeError:
        logger.warning("Discarding malformed notification frame: %r", payload[:200])
        return None
    if not isinstance(event, dict):
        return None
    return event
