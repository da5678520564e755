"""Typed helpers for individual Asana resources.

Each module exposes plain async functions taking an
:class:`~asana_client.AsanaClient` as their first argument. ``list_*``
functions return one :class:`~asana_client.pagination.Page`; ``all_*``
functions walk every page.
"""

from asana_client.resources import custom_fields, memberships, portfolios, users

__all__ = ["custom_fields", "memberships", "portfolios", "users"]
