"""Tests for correlation ID propagation and logging filter."""

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from talentiq.observability.correlation import (
    CorrelationIdFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from talentiq.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    @app.get("/ping")
    async def ping() -> dict:
        return {"correlation_id": get_correlation_id()}

    return app


class TestContext:
    def test_set_generates_when_missing(self) -> None:
        value = set_correlation_id()
        try:
            assert value
            assert get_correlation_id() == value
        finally:
            clear_correlation_id()

        assert get_correlation_id() == ""

    def test_filter_stamps_records(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        set_correlation_id("abc-123")
        try:
            CorrelationIdFilter().filter(record)
        finally:
            clear_correlation_id()

        assert record.correlation_id == "abc-123"

    def test_filter_uses_placeholder_outside_request(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestMiddleware:
    def test_incoming_header_is_propagated_and_echoed(self) -> None:
        client = TestClient(_app())

        response = client.get("/ping", headers={CORRELATION_HEADER: "req-42"})

        assert response.json() == {"correlation_id": "req-42"}
        assert response.headers[CORRELATION_HEADER] == "req-42"

    def test_header_is_minted_when_absent(self) -> None:
        client = TestClient(_app())

        response = client.get("/ping")

        minted = response.headers[CORRELATION_HEADER]
        assert minted
        assert response.json() == {"correlation_id": minted}


def test_configure_logging_installs_single_stamped_handler() -> None:
    from talentiq.observability import configure_logging

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        configure_logging("info")

        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
