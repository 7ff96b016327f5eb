#!/usr/bin/env python3
"""
Helpers shared by the routers and the response mappers.
"""

import uuid
from typing import Optional, Any, List
from datetime import datetime

from fastapi import HTTPException


def validate_uuid(value: str, name: str = "id") -> str:
    """Return value unchanged if it is a UUID, otherwise raise a 400."""
    try:
        uuid.UUID(value)
        return value
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name} format: {value}. Must be a valid UUID."
        )


def safe_str(value: Optional[Any], default: str = "") -> str:
    return default if value is None else str(value)


def safe_list(value: Optional[Any]) -> List[Any]:
    """Return a stored JSON array as a list, or an empty list for anything else."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    return dt.isoformat() if dt is not None else None
