"""Observability configuration using Logfire.

Journal content and auth secrets never go into attributes; services log
identifiers and outcomes only. The scrubbing patterns below are a backstop
for anything that slips through (cookies, tokens, passwords).

Usage:
    import logfire

    logfire.info("Invite code redeemed", code=code.root, identity_id=str(identity_id))

    with logfire.span("life_phase_service.update", phase_id=str(phase_id)):
        ...
"""

import httpx
import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from life.config import Settings

# Attribute names redacted before export, on top of Logfire's defaults
SCRUB_PATTERNS = [
    "auth_token",
    "code_verifier",
    "access_token",
    "refresh_token",
    "anon_key",
    "apikey",
]

# Probed by the load balancer every few seconds
UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is on when OBSERVABILITY__SEND_TO_LOGFIRE says so, or
    otherwise when OBSERVABILITY__LOGFIRE_TOKEN is set. Without either the
    output stays on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name="life-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
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
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming requests, leaving out health checks.

    Headers are not captured since the session cookie rides in them.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        # Route parameters are ids; query strings may carry invite codes
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the shared engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx(client: httpx.AsyncClient) -> None:
    """Trace calls made through the credential store client only.

    Args:
        client: Shared HTTP client for the credential store
    """
    logfire.instrument_httpx(client)
