"""Gmail settings package - holds the API client, dispatch table, and custom errors."""

from . import dispatch
from .client import GmailSettingsService
from .defaults import SettingsDefaults
from .dispatch import SettingCategory, SettingsRequest
from .errors import (
    AuthenticationError,
    ClientError,
    GmailSettingsError,
    InvalidTargetError,
    NetworkError,
    NotFoundError,
    ParseError,
    ServiceError,
)

# Define what gets imported with: from appsamples.gmailsettings import *
__all__ = [
    "AuthenticationError",
    "ClientError",
    "GmailSettingsError",
    "GmailSettingsService",
    "InvalidTargetError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "ServiceError",
    "SettingCategory",
    "SettingsDefaults",
    "SettingsRequest",
    "dispatch",
]
