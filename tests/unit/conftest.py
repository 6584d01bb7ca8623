"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import types
import uuid

import pytest

# cloudguard_app.app reads its configuration at import time, so the test
# environment must be in place before any test module is collected.
os.environ["POWERTOOLS_SERVICE_NAME"] = "cloudguard-app-test"
os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"


@pytest.fixture
def api_event() -> dict:
    """An arbitrary trigger payload; the handler never looks at it."""
    return {"source": "aws.events", "detail-type": "Scheduled Event", "detail": {}}


@pytest.fixture
def lambda_context():
    """A *very* small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="cloudguard-app",
        memory_limit_in_mb=128,
        aws_request_id="req-" + uuid.uuid4().hex,
        invoked_function_arn="arn:aws:lambda:eu-west-1:000000000000:function:cloudguard-app",
        get_remaining_time_in_millis=lambda: 30000,
    )
