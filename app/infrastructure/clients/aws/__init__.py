"""AWS client construction for the DynamoDB backend."""

from infrastructure.clients.aws.client import get_boto3_client
from infrastructure.clients.aws.session_provider import SessionProvider

__all__ = ["SessionProvider", "get_boto3_client"]
