"""Caller identity.

Authentication happens upstream; the gateway forwards the authenticated
user's ID in the X-User-Id header.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status


def optional_user_id(
    x_user_id: Annotated[str | None, Header()] = None,
) -> str | None:
    """The caller's user ID, or None for anonymous callers."""
    if not x_user_id:
        return None
    try:
        return str(UUID(x_user_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-User-Id must be a UUID",
        )


def required_user_id(
    user_id: Annotated[str | None, Depends(optional_user_id)],
) -> str:
    """The caller's user ID; 401 when absent."""
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


OptionalUser = Annotated[str | None, Depends(optional_user_id)]
CurrentUser = Annotated[str, Depends(required_user_id)]
