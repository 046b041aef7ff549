"""Server-sent events route.

Streams a short, fixed sequence of alternating vote and comment events and
then closes. Each event is framed as

    event: <type>
    data: <json>

with a blank line after it.
"""

import asyncio
import json
from typing import AsyncIterator

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from agora.config import Settings

router = APIRouter(prefix="/api/realtime", tags=["realtime"], route_class=DishkaRoute)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def format_event(event_type: str, data: dict) -> str:
    """Frame one server-sent event."""
    return f"event: {event_type}\ndata: {json.dumps(data)}\n\n"


def build_event(sequence: int) -> tuple[str, dict]:
    """Event number sequence (1-based): votes on odd numbers, comments on even."""
    if sequence % 2 == 0:
        return "comment", {"id": f"c{sequence}", "content": f"New comment {sequence}"}
    return "vote", {"id": f"v{sequence}", "targetId": "post-1", "voteType": "upvote"}


async def event_stream(count: int, interval_seconds: float) -> AsyncIterator[str]:
    for sequence in range(1, count + 1):
        await asyncio.sleep(interval_seconds)
        yield format_event(*build_event(sequence))


@router.get("")
async def realtime(settings: FromDishka[Settings]) -> StreamingResponse:
    """Open the event stream."""
    return StreamingResponse(
        event_stream(settings.realtime.event_count, settings.realtime.interval_seconds),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
