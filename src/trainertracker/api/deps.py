"""Shared route dependencies: caller identity and the clock."""

from datetime import datetime

from fastapi import Header, HTTPException


async def get_trainer_id(
    x_trainer_id: int | None = Header(default=None),
) -> int:
    """Trainer id forwarded by the upstream authentication layer."""
    if x_trainer_id is None:
        raise HTTPException(status_code=401, detail="Missing trainer identity")
    return x_trainer_id


def get_now() -> datetime:
    """Current wall-clock time. Overridden in tests to pin the clock."""
    return datetime.now()
