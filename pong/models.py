"""
Data models shared between the simulation and its collaborators.

- Side / EntityKind: small enums used across the game
- ScoreData: validated score pair
- EntityView: immutable snapshot of an entity handed to the skin
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class Side(Enum):
    """Player side of the field."""
    LEFT = "left"
    RIGHT = "right"


class EntityKind(Enum):
    """Closed set of entity kinds the skin knows how to draw."""
    PADDLE = "paddle"
    BALL = "ball"


class ScoreData(BaseModel):
    """Score pair for one session.

    Attributes:
        left: Points of the left player (non-negative)
        right: Points of the right player (non-negative)

    Examples:
        >>> score = ScoreData()
        >>> score.increment(Side.RIGHT).as_tuple
        (0, 1)
    """
    left: int = 0
    right: int = 0

    model_config = ConfigDict(frozen=True)

    @field_validator('left', 'right')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score values are non-negative."""
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v

    @property
    def as_tuple(self) -> tuple:
        """Score as (left, right)."""
        return (self.left, self.right)

    def increment(self, side: Side) -> 'ScoreData':
        """Return a new ScoreData with one point added for ``side``."""
        if side is Side.LEFT:
            return ScoreData(left=self.left + 1, right=self.right)
        return ScoreData(left=self.left, right=self.right + 1)

    def __str__(self) -> str:
        return f"ScoreData({self.left}:{self.right})"


class EntityView(BaseModel):
    """What the skin needs to draw one entity.

    Position is the entity center; all values are field percentages.
    """
    kind: EntityKind
    x: float
    y: float
    width: float
    height: float
    visible: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def left(self) -> float:
        """Left edge."""
        return self.x - self.width / 2

    @property
    def top(self) -> float:
        """Top edge."""
        return self.y - self.height / 2
