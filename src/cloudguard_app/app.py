"""
The Lambda entry point for the CloudGuard protected app.

`cloudguard_handler` is the business operation: it logs and returns a fixed
message. `handler` is the `(event, context)` adapter the AWS Lambda Python
runtime calls (handler path: `cloudguard_app.app.handler`).
"""

import asyncio

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from .config import get_config

# If you change this message, update tests/unit/test_app.py as well.
MESSAGE = "This serverless app X is protected by CloudGuard!"

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(
    namespace=CONFIG.metrics_namespace,
    service=CONFIG.service_name,
)


async def cloudguard_handler() -> str:
    """Returns the static CloudGuard message. Every log record goes to CloudWatch."""
    message = MESSAGE
    logger.info(message)
    return message


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: dict, context: LambdaContext) -> str:
    """Main Lambda handler. The event payload is ignored."""
    metrics.add_dimension("environment", CONFIG.environment)
    metrics.add_metric(name="ProtectedInvocations", unit=MetricUnit.Count, value=1)
    return asyncio.run(cloudguard_handler())
