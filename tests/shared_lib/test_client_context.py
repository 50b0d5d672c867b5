"""
Tests for ClientContext and setup_logging.
"""

import logging

from shared_lib.client_context import ClientContext
from shared_lib.logging import setup_logging


class TestClientContext:
    def test_defaults(self):
        context = ClientContext()

        assert context.client_kwargs() == {"proxy": None, "timeout": 30.0}

    def test_user_agent_and_http_options(self):
        transport = object()
        context = ClientContext(
            user_agent="Agent/1", http_options={"transport": transport}
        )

        kwargs = context.client_kwargs()

        assert kwargs["user_agent"] == "Agent/1"
        assert kwargs["transport"] is transport

    def test_http_options_copied(self):
        options = {"verify": False}
        context = ClientContext(http_options=options)
        options["verify"] = True

        assert context.client_kwargs()["verify"] is False


class TestSetupLogging:
    def test_quiets_http_libraries(self):
        setup_logging(logging.DEBUG)

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
