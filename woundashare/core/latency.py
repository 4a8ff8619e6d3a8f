"""
Simulated network latency for the mock data service.
"""
import asyncio
import logging

from ..config import settings

logger = logging.getLogger(__name__)

# Seconds per operation, before settings.latency_scale is applied
OPERATION_DELAYS = {
    "login": 1.0,
    "register": 1.0,
    "upload_image": 1.5,
    "list_reports": 0.5,
    "get_report": 0.3,
    "create_report": 1.0,
    "attach_prescription": 1.0,
}


async def simulate_latency(operation: str) -> None:
    """
    Wait for the fixed delay configured for an operation.
    
    Args:
        operation: Key in OPERATION_DELAYS
    """
    delay = OPERATION_DELAYS[operation] * settings.latency_scale
    if delay > 0:
        logger.debug(f"Simulating {delay:.2f}s latency for {operation}")
        await asyncio.sleep(delay)
