from .engine import CoordinateError, derive_rarity, validate_coordinate
from .models import InvalidRarity, InvalidRarityCode, PositionalCoordinate, Rarity, to_code
from .schedule import (
    COIN_VALUE,
    DEFAULT_SCHEDULE,
    DIFFCHANGE_INTERVAL,
    INITIAL_SUBSIDY,
    SUBSIDY_HALVING_INTERVAL,
    EmissionSchedule,
    ScheduleError,
    SubsidySchedule,
)

__all__ = [
    "COIN_VALUE",
    "CoordinateError",
    "DEFAULT_SCHEDULE",
    "DIFFCHANGE_INTERVAL",
    "EmissionSchedule",
    "INITIAL_SUBSIDY",
    "InvalidRarity",
    "InvalidRarityCode",
    "PositionalCoordinate",
    "Rarity",
    "SUBSIDY_HALVING_INTERVAL",
    "ScheduleError",
    "SubsidySchedule",
    "derive_rarity",
    "to_code",
    "validate_coordinate",
]
