from __future__ import annotations

from typing import Literal


ProStatus = Literal["active", "trialing", "none"]

# Checked in order; the first match is reported.
PRO_STATUSES: tuple[str, ...] = ("active", "trialing")
REVOKED_STATUSES = frozenset({"canceled", "unpaid"})


def is_access_revoked(status: str | None) -> bool:
    return status in REVOKED_STATUSES
