"""Logfire setup for the API process.

Services log with the module-level logfire API:

    logfire.info("Vote cast", target_id=str(target_id), delta=delta)
    with logfire.span("comment_service.create_comment", post_id=str(post_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import Settings


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Point logfire at the cloud project or at the console only.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise having a
    token is enough to export.
    """
    send_to_logfire = _should_send(settings)
    token = settings.observability.logfire_token

    logfire.configure(
        service_name="agora-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=token or None,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    result = dict(attributes)
    result["method"] = getattr(request, "method", None)
    url = getattr(request, "url", None)
    if url is not None:
        result["path"] = url.path
    headers = getattr(request, "headers", None)
    acting_user = headers.get("x-user-id") if headers is not None else None
    if acting_user:
        result["user_id"] = acting_user
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Span per request, tagged with method, path and the X-User-Id caller."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented")
