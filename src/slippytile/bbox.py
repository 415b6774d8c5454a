"""Axis-aligned bounding boxes in projected (Web Mercator) coordinates.

A ``BBox`` is a plain value: it is never validated, so a box with
``min_x > max_x`` is representable and simply reports a negative width.
"""
from dataclasses import dataclass
from typing import Sequence, Tuple, List

from .errors import BBoxFieldCountError, BBoxNumberError


@dataclass(frozen=True)
class BBox:
    """Rectangle in planar coordinates.

    Parameters
    ----------
    min_x, min_y : float
        Lower-left corner in meters.
    max_x, max_y : float
        Upper-right corner in meters.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        """Return True if ``(x, y)`` lies inside the half-open box.

        The lower edges are inclusive and the upper edges exclusive, so a
        point on the shared edge of two adjacent boxes belongs to exactly
        one of them.
        """
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y

    def to_buffered(self, buffer: float) -> "BBox":
        """Return a copy grown by ``buffer`` on every side.

        A negative buffer shrinks the box.
        """
        return BBox(
            self.min_x - buffer,
            self.min_y - buffer,
            self.max_x + buffer,
            self.max_y + buffer,
        )

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "BBox":
        """Build a box from ``(min_x, min_y, max_x, max_y)``.

        Any four element sequence works, including numpy arrays.
        """
        min_x, min_y, max_x, max_y = values
        return cls(float(min_x), float(min_y), float(max_x), float(max_y))

    @classmethod
    def from_tuple(cls, values: Tuple[float, float, float, float]) -> "BBox":
        return cls.from_sequence(values)

    def to_list(self) -> List[float]:
        return [self.min_x, self.min_y, self.max_x, self.max_y]

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def __iter__(self):
        return iter(self.to_tuple())

    def __str__(self):
        return ",".join(repr(float(v)) for v in self.to_tuple())

    @classmethod
    def parse(cls, text: str) -> "BBox":
        """Parse a box from ``"min_x,min_y,max_x,max_y"``.

        Whitespace around each field is ignored.

        Raises
        ------
        BBoxFieldCountError
            If the text does not hold exactly four fields.
        BBoxNumberError
            If a field is not a floating point number.
        """
        parts = text.split(",")
        if len(parts) != 4:
            raise BBoxFieldCountError(len(parts))

        values = []
        for part in parts:
            field = part.strip()
            try:
                if "_" in field:
                    raise ValueError(f"invalid float literal: {field!r}")
                values.append(float(field))
            except ValueError as err:
                raise BBoxNumberError(field, err) from err
        return cls(*values)

    from_str = parse
