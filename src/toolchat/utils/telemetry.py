"""Span helpers for the transport and the command session.

Spans go through the OpenTelemetry API, which stays a no-op until an SDK
tracer provider is installed.  The CLI installs one through
:func:`configure_telemetry` when ``--otel-endpoint`` or ``--trace-console``
is given; both need the ``otel`` extra (``pip install toolchat[otel]``).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from opentelemetry import trace

# Span attribute keys.
ATTR_RPC_METHOD = "toolchat.rpc.method"
ATTR_RPC_ID = "toolchat.rpc.id"
ATTR_HTTP_STATUS = "toolchat.http.status_code"
ATTR_SERVER_URL = "toolchat.server.url"
ATTR_SERVER_NAME = "toolchat.server.name"
ATTR_TOOL_NAME = "toolchat.tool.name"
ATTR_MATCH_RULE = "toolchat.match.rule"
ATTR_MISSING_COUNT = "toolchat.match.missing_required"

_INSTRUMENTATION_NAME = "toolchat"

_SDK_HINT = "Install it with: pip install toolchat[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name* (a no-op tracer until telemetry is configured)."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    otlp_endpoint: str | None = None,
    console: bool = False,
    console_out: TextIO | None = None,
    service_name: str = "toolchat",
) -> bool:
    """Install an SDK tracer provider exporting toolchat spans.

    *otlp_endpoint* ships spans in batches over OTLP/gRPC.  *console*
    prints each span as JSON to *console_out* (stderr by default, so
    command output on stdout stays clean).

    Returns ``False`` without touching the global provider when no
    exporter was requested.

    Raises:
        ImportError: the SDK, or the OTLP exporter when an endpoint is
            given, is not installed.
    """
    if not otlp_endpoint and not console:
        return False

    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for span export. {_SDK_HINT}"
        raise ImportError(msg) from exc

    provider: Any = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if console:
        exporter = ConsoleSpanExporter(out=console_out or sys.stderr)
        provider.add_span_processor(SimpleSpanProcessor(exporter))
    if otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))

    trace.set_tracer_provider(provider)
    return True


def _otlp_exporter(endpoint: str) -> Any:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
            OTLPSpanExporter,
        )
    except ImportError as exc:
        msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_SDK_HINT}"
        raise ImportError(msg) from exc
    return OTLPSpanExporter(endpoint=endpoint)
