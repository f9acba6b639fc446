"""A multi-level parking lot with size-matched slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SlotStatus(Enum):
    FREE = "free"
    OCCUPIED = "occupied"


class NoAvailableSlotError(RuntimeError):
    """Raised when no free slot fits a vehicle."""


@dataclass(frozen=True)
class Vehicle:
    size: int
    vehicle_id: int
    active: bool = True


@dataclass
class Slot:
    size: int
    slot_id: int
    status: SlotStatus = SlotStatus.FREE


@dataclass(frozen=True)
class Ticket:
    vehicle_id: int
    slot_id: int

    def __str__(self) -> str:
        return f"Ticket #: {self.vehicle_id} Spot #: {self.slot_id}"


@dataclass
class ParkingLot:
    """Levels of small (1), medium (2) and large (3) slots."""

    level_count: int = 3
    small_slots: int = 3
    medium_slots: int = 3
    large_slots: int = 3
    levels: list[list[Slot]] = field(init=False)
    _occupied: dict[int, Slot] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        sizes = (
            [1] * self.small_slots + [2] * self.medium_slots + [3] * self.large_slots
        )
        self.levels = [
            [Slot(size, slot_id) for slot_id, size in enumerate(sizes)]
            for _ in range(self.level_count)
        ]

    def park(self, vehicle: Vehicle) -> Ticket:
        """Occupy a matching free slot and return the ticket for it."""
        slot = self.find_slot(vehicle)
        slot.status = SlotStatus.OCCUPIED
        self._occupied[vehicle.vehicle_id] = slot
        return Ticket(vehicle.vehicle_id, slot.slot_id)

    def find_slot(self, vehicle: Vehicle) -> Slot:
        """Return the first free slot whose size equals the vehicle's."""
        for level in self.levels:
            for slot in level:
                if slot.size == vehicle.size and slot.status is SlotStatus.FREE:
                    return slot
        raise NoAvailableSlotError("No available slot.")

    def unpark(self, vehicle: Vehicle) -> None:
        """Free the slot held by ``vehicle``."""
        try:
            slot = self._occupied.pop(vehicle.vehicle_id)
        except KeyError:
            raise KeyError(f"vehicle {vehicle.vehicle_id} is not parked") from None
        slot.status = SlotStatus.FREE

    def parked_spot(self, vehicle: Vehicle) -> int:
        """Return the id of the slot where ``vehicle`` is parked."""
        try:
            return self._occupied[vehicle.vehicle_id].slot_id
        except KeyError:
            raise KeyError(f"vehicle {vehicle.vehicle_id} is not parked") from None