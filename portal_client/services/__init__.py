"""Endpoint clients built on the request gateway."""

from portal_client.services.users import UsersApi

__all__ = ["UsersApi"]
