"""
Shared primitive data types for the celebration games.

This module provides the basic geometric types used by the games, the
input layer, and the read-only projections handed to the page layer.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point for positions and pointer coordinates.

    Attributes:
        x: X coordinate (horizontal, pixels from the left edge)
        y: Y coordinate (vertical, pixels from the top edge)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.x
        100.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Pixel dimensions of a display or play area.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> area = Resolution(width=640, height=360)
        >>> area.aspect_ratio
        1.7777777777777777
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by its top-left corner and size.

    Position is at top-left corner (pygame convention).

    Examples:
        >>> rect = Rectangle(x=10.0, y=10.0, width=48.0, height=48.0)
        >>> rect.contains_point(Point2D(x=30.0, y=30.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle (edges inclusive)."""
        return (self.x <= point.x <= self.right and
                self.y <= point.y <= self.bottom)
