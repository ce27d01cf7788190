"""Result sources for the picker."""

from .base import Channel
from .stdin import StdinChannel

__all__ = [
    "Channel",
    "StdinChannel",
]
