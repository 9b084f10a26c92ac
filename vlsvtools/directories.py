"""Bookkeeping of output directories and coordinate labels for converted meshes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

__all__ = ["DirectoryTracker", "CoordinateLabels"]


class DirectoryTracker:
    """Remember which output directories exist, creating each level only once.

    Creating a directory that already exists is an error in the output format,
    as is entering one that does not. The tracker records every directory it
    has made so callers can create nested paths one level at a time without
    repeating work.
    """

    def __init__(self) -> None:
        self.directories: set[str] = set()
        self.created: list[str] = []

    def __contains__(self, path: object) -> bool:
        return path in self.directories

    def __len__(self) -> int:
        return len(self.directories)

    def create(self, directory: str, root: str = "") -> str:
        """Create ``directory`` below ``root`` one level at a time.

        Empty path components are skipped, so leading, trailing and doubled
        slashes are harmless. Newly made directories are appended to
        :attr:`created` in the order they were made. Returns the full path of
        the innermost directory; if ``directory`` itself is already known it
        is returned unchanged and nothing is created.
        """
        if directory in self.directories:
            return directory
        current = root
        for part in directory.split("/"):
            if not part:
                continue
            current = f"{current}/{part}"
            if current not in self.directories:
                self.directories.add(current)
                self.created.append(current)
        return current

    def clear(self) -> None:
        """Forget all known directories."""
        self.directories.clear()
        self.created.clear()


@dataclass(frozen=True)
class CoordinateLabels:
    """Names and units of the three coordinate axes of a mesh."""

    xlabel: str = "x-coordinate"
    ylabel: str = "y-coordinate"
    zlabel: str = "z-coordinate"
    xunit: str = "m"
    yunit: str = "m"
    zunit: str = "m"

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> "CoordinateLabels":
        """Take labels and units from array attributes, using defaults for missing ones."""
        defaults = cls()
        return cls(
            xlabel=attributes.get("xlabel", defaults.xlabel),
            ylabel=attributes.get("ylabel", defaults.ylabel),
            zlabel=attributes.get("zlabel", defaults.zlabel),
            xunit=attributes.get("xunit", defaults.xunit),
            yunit=attributes.get("yunit", defaults.yunit),
            zunit=attributes.get("zunit", defaults.zunit),
        )