"""Identifier helpers."""

from __future__ import annotations

import uuid


def parse_guid(value: str | uuid.UUID, name: str = "id") -> str:
    """Validate a GUID and return its canonical string form."""
    if isinstance(value, uuid.UUID):
        return str(value)
    try:
        return str(uuid.UUID(str(value).strip()))
    except ValueError:
        raise ValueError(f"{name} must be a GUID, got {value!r}") from None


def account_id_from_hub_id(hub_id: str) -> str:
    """ACC/BIM 360 hub ids are the account id prefixed with `b.`."""
    hub_id = hub_id.strip()
    if hub_id.startswith("b."):
        hub_id = hub_id[2:]
    return hub_id


def normalize_account_id(value: str | uuid.UUID) -> str:
    """Accept an account id or a hub id and return the account GUID."""
    if isinstance(value, str):
        value = account_id_from_hub_id(value)
    return parse_guid(value, "account_id")
