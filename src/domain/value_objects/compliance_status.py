from __future__ import annotations

from enum import Enum


class ComplianceStatus(str, Enum):
    SAFE = "safe"
    MILK_RESTRICTED = "milk-restricted"
    MEAT_RESTRICTED = "meat-restricted"
    FULLY_RESTRICTED = "fully-restricted"

    @property
    def is_safe(self) -> bool:
        return self is ComplianceStatus.SAFE
