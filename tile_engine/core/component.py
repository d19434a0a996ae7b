"""
Component base class for data-only records.

Components are pure data containers with NO game logic.
Logic lives in the controllers and detectors that read them.

Usage:
    class Player(Component):
        x: int = 0
        y: int = 0

    class RegionInfo(Component):
        model_config = ConfigDict(frozen=True)
        code: str
        name: str
"""

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Components are data-only containers using Pydantic for:
    - Automatic validation
    - Type hints
    - Default values

    Subclasses that must never change after creation set
    ``model_config = ConfigDict(frozen=True)``.
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Unknown fields are a typo, not data
        extra='forbid',
    )
