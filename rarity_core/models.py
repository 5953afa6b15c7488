"""Domain models for sat rarity classification."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, Optional, Tuple


class InvalidRarity(ValueError):
    """Raised when text does not name one of the rarity tiers."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid rarity `{text}`")
        self.input = text


class InvalidRarityCode(ValueError):
    """Raised when an integer is not a valid rarity code.

    The offending integer is kept as the only argument so callers can report it.
    """

    def __init__(self, value: int) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"invalid rarity code {self.value}"


@total_ordering
class Rarity(Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"
    BLACK_UNCOMMON = "black_uncommon"
    BLACK_RARE = "black_rare"
    BLACK_EPIC = "black_epic"
    BLACK_LEGENDARY = "black_legendary"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return _RANKS[self] < _RANKS[other]

    def to_string(self) -> str:
        return self.value

    @property
    def is_black(self) -> bool:
        return self in _BLACK_TIERS

    @property
    def code(self) -> Optional[int]:
        """Small-integer code, or None for the black tiers which have none."""

        return _CODES.get(self)

    @classmethod
    def parse(cls, text: str) -> "Rarity":
        rarity = _BY_NAME.get(text)
        if rarity is None:
            raise InvalidRarity(text)
        return rarity

    @classmethod
    def from_code(cls, value: int) -> "Rarity":
        for rarity, code in _CODES.items():
            if code == value:
                return rarity
        raise InvalidRarityCode(value)

    @classmethod
    def first_position_tiers(cls) -> Tuple["Rarity", ...]:
        return tuple(rarity for rarity in cls if not rarity.is_black)

    @classmethod
    def black_tiers(cls) -> Tuple["Rarity", ...]:
        return _BLACK_TIERS


_RANKS: Dict[Rarity, int] = {rarity: rank for rank, rarity in enumerate(Rarity)}
_BY_NAME: Dict[str, Rarity] = {rarity.value: rarity for rarity in Rarity}
_BLACK_TIERS: Tuple[Rarity, ...] = (
    Rarity.BLACK_UNCOMMON,
    Rarity.BLACK_RARE,
    Rarity.BLACK_EPIC,
    Rarity.BLACK_LEGENDARY,
)
_CODES: Dict[Rarity, int] = {
    Rarity.COMMON: 0,
    Rarity.UNCOMMON: 1,
    Rarity.RARE: 2,
    Rarity.EPIC: 3,
    Rarity.LEGENDARY: 4,
    Rarity.MYTHIC: 5,
}


def to_code(rarity: Rarity) -> Optional[int]:
    return rarity.code


@dataclass(frozen=True)
class PositionalCoordinate:
    """Position of a sat within the emission schedule, coarsest to finest."""

    epoch: int
    epoch_position: int  # block height since the start of the halving era
    period_position: int  # block height since the last difficulty adjustment
    subsidy_position: int  # index of the sat within its block's subsidy

    def to_dict(self) -> Dict[str, int]:
        return {
            "epoch": self.epoch,
            "epoch_position": self.epoch_position,
            "period_position": self.period_position,
            "subsidy_position": self.subsidy_position,
        }

    @staticmethod
    def from_dict(data: Dict[str, int]) -> "PositionalCoordinate":
        return PositionalCoordinate(
            epoch=int(data["epoch"]),
            epoch_position=int(data["epoch_position"]),
            period_position=int(data["period_position"]),
            subsidy_position=int(data["subsidy_position"]),
        )
