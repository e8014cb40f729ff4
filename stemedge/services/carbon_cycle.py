"""
Carbon cycle: move fixed amounts of carbon between reservoirs.
"""
from dataclasses import dataclass
from typing import Callable
from stemedge.core.config import get_settings
from stemedge.models.schemas import Reservoir
import logging
import time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferAction:
    source: str
    dest: str
    amount: float
    label: str


TRANSFER_ACTIONS: dict[str, TransferAction] = {
    "photosynthesis": TransferAction("atmosphere", "plants", 10, "Photosynthesis"),
    "plant_respiration": TransferAction("plants", "atmosphere", 5, "Respiration"),
    "animal_respiration": TransferAction("animals", "atmosphere", 5, "Respiration"),
    "combustion": TransferAction("fossils", "atmosphere", 20, "Combustion"),
}


def default_reservoirs() -> list[Reservoir]:
    return [
        Reservoir(id="atmosphere", name="Atmosphere", quantity=100, x=50, y=10),
        Reservoir(id="plants", name="Plants", quantity=50, x=20, y=50),
        Reservoir(id="animals", name="Animals", quantity=20, x=80, y=50),
        Reservoir(id="fossils", name="Fossil Fuels", quantity=200, x=80, y=90),
        Reservoir(id="soil", name="Soil", quantity=80, x=20, y=90),
    ]


class CarbonCycle:
    """
    Reservoirs plus a settle period after each transfer.

    Transfers requested while the previous one is still settling are
    dropped. Quantities have no floor and can go negative.
    """

    def __init__(
        self,
        reservoirs: list[Reservoir] | None = None,
        settle_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.reservoirs = {r.id: r for r in (reservoirs or default_reservoirs())}
        self.settle_seconds = (
            settle_seconds if settle_seconds is not None else get_settings().CARBON_SETTLE_SECONDS
        )
        self.clock = clock
        self._settle_until: float | None = None
        self._active_label: str | None = None

    @property
    def total(self) -> float:
        return sum(r.quantity for r in self.reservoirs.values())

    @property
    def active_action(self) -> str | None:
        """Label of the transfer still settling, if any."""
        if self._settle_until is None or self.clock() >= self._settle_until:
            return None
        return self._active_label

    def quantity(self, reservoir_id: str) -> float:
        return self.reservoirs[reservoir_id].quantity

    def run_action(self, action_id: str) -> bool:
        try:
            action = TRANSFER_ACTIONS[action_id]
        except KeyError:
            raise KeyError(f"Unknown carbon action: {action_id}") from None
        return self.transfer(action.source, action.dest, action.amount, action.label)

    def transfer(self, source: str, dest: str, amount: float, label: str) -> bool:
        """Move ``amount`` from source to dest. Returns False if dropped while settling."""
        if source not in self.reservoirs or dest not in self.reservoirs:
            raise KeyError(f"Unknown reservoir in transfer {source} -> {dest}")

        if self.active_action is not None:
            logger.debug(f"Dropped '{label}' while '{self._active_label}' is settling")
            return False

        self.reservoirs[source].quantity -= amount
        self.reservoirs[dest].quantity += amount

        self._active_label = label
        self._settle_until = self.clock() + self.settle_seconds
        logger.info(f"{label}: moved {amount} from {source} to {dest}")
        return True
