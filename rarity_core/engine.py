"""Pure rarity derivation over a sat's positional coordinate."""

from .models import PositionalCoordinate, Rarity
from .schedule import DEFAULT_SCHEDULE, EmissionSchedule


class CoordinateError(ValueError):
    """Raised when a coordinate violates the emission schedule invariants."""


def validate_coordinate(coordinate: PositionalCoordinate, subsidy: int) -> None:
    """Check the invariants derive_rarity relies on.

    Callers run this upstream; derive_rarity itself never does.
    """

    for name, value in coordinate.to_dict().items():
        if value < 0:
            raise CoordinateError(f"{name} cannot be negative.")
    if subsidy <= 0:
        raise CoordinateError("subsidy must be positive.")
    if coordinate.subsidy_position >= subsidy:
        raise CoordinateError(
            f"subsidy_position {coordinate.subsidy_position} is outside a subsidy of {subsidy}."
        )


def derive_rarity(
    coordinate: PositionalCoordinate,
    subsidy: int,
    schedule: EmissionSchedule = DEFAULT_SCHEDULE,
) -> Rarity:
    """Classify a sat from its coordinate and the subsidy of its epoch.

    The first sat of a block ranks by how many boundaries the block opens
    (era and difficulty period, era, period, or just the block). The last sat
    of a block's subsidy ranks the same way by the boundaries the block closes.
    """

    epoch = coordinate.epoch
    epoch_position = coordinate.epoch_position
    period_position = coordinate.period_position
    subsidy_position = coordinate.subsidy_position

    if subsidy_position == 0:
        if epoch_position == 0 and period_position == 0:
            return Rarity.MYTHIC if epoch == 0 else Rarity.LEGENDARY
        if epoch_position == 0:
            return Rarity.EPIC
        if period_position == 0:
            return Rarity.RARE
        return Rarity.UNCOMMON

    if subsidy_position == subsidy - 1:
        closes_era = epoch_position == schedule.halving_interval - 1
        closes_period = period_position == schedule.diffchange_interval - 1
        if closes_era and closes_period:
            return Rarity.BLACK_LEGENDARY
        if closes_era:
            return Rarity.BLACK_EPIC
        if closes_period:
            return Rarity.BLACK_RARE
        return Rarity.BLACK_UNCOMMON

    return Rarity.COMMON
