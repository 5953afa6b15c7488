"""Emission schedule parameters used by rarity derivation."""

import os
from dataclasses import dataclass
from typing import Dict, Protocol

COIN_VALUE = 100_000_000
SUBSIDY_HALVING_INTERVAL = 210_000
DIFFCHANGE_INTERVAL = 2_016
INITIAL_SUBSIDY = 50 * COIN_VALUE


class ScheduleError(ValueError):
    """Raised when emission schedule parameters are invalid."""


class SubsidySchedule(Protocol):
    def subsidy(self, epoch: int) -> int:
        ...


@dataclass(frozen=True)
class EmissionSchedule:
    """Halving era length, difficulty period length and first-era subsidy."""

    halving_interval: int = SUBSIDY_HALVING_INTERVAL
    diffchange_interval: int = DIFFCHANGE_INTERVAL
    initial_subsidy: int = INITIAL_SUBSIDY

    def __post_init__(self) -> None:
        for name, value in self.to_dict().items():
            if value <= 0:
                raise ScheduleError(f"{name} must be positive.")

    def subsidy(self, epoch: int) -> int:
        """Return the per-block subsidy for the epoch, halved once per era."""

        if epoch < 0:
            raise ScheduleError("epoch cannot be negative.")
        return self.initial_subsidy >> epoch

    def to_dict(self) -> Dict[str, int]:
        return {
            "halving_interval": self.halving_interval,
            "diffchange_interval": self.diffchange_interval,
            "initial_subsidy": self.initial_subsidy,
        }

    @staticmethod
    def from_env() -> "EmissionSchedule":
        return EmissionSchedule(
            halving_interval=_env_int("RARITY_HALVING_INTERVAL", SUBSIDY_HALVING_INTERVAL),
            diffchange_interval=_env_int("RARITY_DIFFCHANGE_INTERVAL", DIFFCHANGE_INTERVAL),
            initial_subsidy=_env_int("RARITY_INITIAL_SUBSIDY", INITIAL_SUBSIDY),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ScheduleError(f"{name} must be an integer, got {raw!r}.") from None


DEFAULT_SCHEDULE = EmissionSchedule()
