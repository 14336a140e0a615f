"""Logfire setup for the forum API.

Spans and events are emitted directly through ``logfire`` by the services
and repositories; this module configures the SDK, wires the FastAPI and
SQLAlchemy integrations and reports script failures.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings

SERVICE_NAME = "forum-api"
SERVICE_VERSION = "0.1.0"

# Query parameters copied onto request spans
_TRACED_PARAMS = ("thread", "post", "forum", "sort", "order", "limit")


def sends_to_logfire(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise a token enables it.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Args:
        settings: Application settings
    """
    send = sends_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        segment_width=settings.paths.segment_width,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    result = dict(attributes)
    query = getattr(request, "query_params", None)
    if query is not None:
        for name in _TRACED_PARAMS:
            if name in query:
                result[f"forum.{name}"] = query[name]
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span per request, tagged with the listing parameters."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span per SQL statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


@contextmanager
def reported_failure(step: str) -> Iterator[None]:
    """Log an exception escaping ``step`` to Logfire, then re-raise it."""
    try:
        yield
    except Exception as e:
        logfire.exception("{step} failed", step=step, error_type=type(e).__name__)
        raise
