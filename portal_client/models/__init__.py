"""Public models for the portal client."""

from portal_client.models.requests import RequestDescriptor
from portal_client.models.users import ChangePasswordRequest, UpdateProfileRequest, UserProfile

__all__ = [
    "ChangePasswordRequest",
    "RequestDescriptor",
    "UpdateProfileRequest",
    "UserProfile",
]
