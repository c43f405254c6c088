from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    FARMER = "farmer"
    VETERINARIAN = "veterinarian"
    ADMIN = "admin"
    LAB = "lab"

    def can_prescribe(self) -> bool:
        return self is Role.VETERINARIAN

    def can_manage_animals(self) -> bool:
        return self in {Role.FARMER, Role.ADMIN}

    def can_raise_alerts(self) -> bool:
        return self in {Role.ADMIN, Role.VETERINARIAN, Role.LAB}

    def sees_all_farms(self) -> bool:
        return self in {Role.ADMIN, Role.VETERINARIAN, Role.LAB}
