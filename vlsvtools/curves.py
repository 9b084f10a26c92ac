"""Collection of (x, y) curve samples gathered from a series of VLSV files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping

__all__ = ["CurveData", "CurveCollection"]

_LABEL_KEYS = ("xlabel", "ylabel", "xunit", "yunit")


@dataclass
class CurveData:
    """Axis labels, units and samples of one curve, keyed by x value."""

    xlabel: str = ""
    ylabel: str = ""
    xunit: str = ""
    yunit: str = ""
    data: dict[float, float] = field(default_factory=dict)

    def sorted_points(self) -> list[tuple[float, float]]:
        """Return the samples as (x, y) pairs in ascending x order."""
        return sorted(self.data.items())


class CurveCollection:
    """Curves indexed by name; samples may arrive in any order.

    Files are not read in chronological order, so each curve keeps its samples
    keyed by x and hands them out sorted by ascending x. A later sample with an
    x value already present replaces the earlier one.
    """

    def __init__(self) -> None:
        self.curves: dict[str, CurveData] = {}

    def __len__(self) -> int:
        return len(self.curves)

    def __contains__(self, name: object) -> bool:
        return name in self.curves

    def __getitem__(self, name: str) -> CurveData:
        return self.curves[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def add(
        self,
        name: str,
        x: float,
        y: float,
        attributes: Mapping[str, str] | None = None,
    ) -> CurveData:
        """Store the sample ``(x, y)`` of curve ``name``.

        Labels and units found in ``attributes`` replace the curve's current
        ones; those not given are left as they are.
        """
        curve = self.curves.setdefault(name, CurveData())
        if attributes:
            for key in _LABEL_KEYS:
                if key in attributes:
                    setattr(curve, key, attributes[key])
        curve.data[float(x)] = float(y)
        return curve

    def series(self, name: str) -> tuple[list[float], list[float]]:
        """Return the x and y values of a curve, sorted by ascending x."""
        try:
            curve = self.curves[name]
        except KeyError:
            raise KeyError(f"no curve named {name!r}") from None
        points = curve.sorted_points()
        return [x for x, _ in points], [y for _, y in points]

    def names(self) -> list[str]:
        """Return the names of all curves in sorted order."""
        return sorted(self.curves)