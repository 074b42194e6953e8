"""Pong skins."""

from .base import PongSkin, NullSkin, format_score
from .geometric import GeometricSkin, field_rect

__all__ = [
    'PongSkin', 'NullSkin', 'format_score',
    'GeometricSkin', 'field_rect',
]
