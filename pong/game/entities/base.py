"""Base class for the entities a World drives each tick."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from pong.models import EntityView

if TYPE_CHECKING:
    from ..world import World
    from ..skins.base import PongSkin


class Entity(ABC):
    """Something the World updates and draws once per tick.

    Only two kinds exist, Paddle and Ball. Subclasses must implement:
        - update(dt): advance the simulation by dt milliseconds
        - view(): snapshot handed to the skin
    """

    def __init__(self) -> None:
        self._world: Optional['World'] = None

    @property
    def world(self) -> Optional['World']:
        """World this entity is registered with, if any."""
        return self._world

    def bind(self, world: 'World') -> None:
        """Attach the entity to its owning world."""
        self._world = world

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the entity by dt milliseconds.

        Args:
            dt: Elapsed time in milliseconds (non-negative)
        """
        pass

    @abstractmethod
    def view(self) -> EntityView:
        """Snapshot of what the skin needs to draw this entity."""
        pass

    def draw(self, skin: 'PongSkin') -> None:
        """Expose the current state to the skin. Never mutates state."""
        skin.draw_entity(self.view())
