"""Integration settings __init__ - exports all backend integration settings."""

from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.configuration.integrations.azure import AzureSettings
from infrastructure.configuration.integrations.google import GcpSettings

__all__ = [
    "AwsSettings",
    "AzureSettings",
    "GcpSettings",
]
