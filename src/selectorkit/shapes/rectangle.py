"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair with an area computation.

    Inputs are not validated; negative or non-numeric sizes are the
    caller's responsibility.
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
