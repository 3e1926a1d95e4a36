"""Base AWS client utilities for infrastructure clients.

Provides `get_boto3_client`. This module intentionally avoids reading
settings at import time and accepts configuration via parameters.
"""

from typing import Any, Dict, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
import structlog

logger = structlog.get_logger()


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
) -> BaseClient:
    """Create a boto3 low-level client for the given service.

    Low-level clients are thread-safe and are meant to be created once and
    shared by every caller of a store.

    Args:
        service_name: AWS service name (e.g., 'dynamodb')
        session_config: Optional boto3 session kwargs (region_name, credentials)
        client_config: Optional client kwargs (e.g., endpoint_url)

    Returns:
        botocore client instance
    """
    session_config = session_config or {}
    client_config = client_config or {}

    session = boto3.Session(**session_config)
    logger.debug(
        "creating_boto3_client",
        service_name=service_name,
        region=session_config.get("region_name"),
        endpoint_url=client_config.get("endpoint_url"),
    )
    return session.client(service_name, **client_config)
