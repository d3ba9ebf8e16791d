"""
Region parsing for generated source files.

The external generator emits a single source file in which each type group
is wrapped in ``#region <name>`` / ``#endregion`` markers. Everything outside
a region is treated as the file preamble (usings, namespace opening) and is
prepended to every region so each one can be emitted as a standalone file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG = logging.getLogger(__name__)

REGION_START = "#region"
REGION_END = "#endregion"

# Below DEBUG, for per-line tracing of the parsed file
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def split_lines(content: str) -> list[str]:
    """Split text on line breaks only, unlike str.splitlines()."""
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


@dataclass(frozen=True)
class Region:
    """A named block of generated code, preamble included.

    Attributes:
        name: Name taken from the start marker
        lines: Preamble lines followed by the lines between the markers
    """

    name: str
    lines: tuple[str, ...]

    def to_source(self) -> str:
        """Render the region, dropping blank lines."""
        return os.linesep.join(line for line in self.lines if line.strip())


class RegionParser:
    """Splits a generated file into regions in a single forward pass."""

    def __init__(
        self,
        start_marker: str = REGION_START,
        end_marker: str = REGION_END,
        logger: logging.Logger | None = None,
    ):
        self.start_marker = start_marker
        self.end_marker = end_marker
        self._log = logger or LOG

    def parse(self, path: Path) -> list[Region]:
        """
        Parse the regions of a file.

        A missing file is logged and yields no regions. A region that is
        never closed is dropped, and an end marker outside a region is ignored.

        Args:
            path: File to parse

        Returns:
            Regions in file order
        """
        path = Path(path)
        if not path.exists():
            self._log.error("File does not exist: %s", path)
            return []

        content = path.read_text(encoding="utf-8-sig")
        self._log.debug("File content before processing:%s%s", os.linesep, content)

        return self.parse_lines(split_lines(content))

    def parse_lines(self, lines: list[str]) -> list[Region]:
        """Parse regions from already-read lines."""
        regions: list[Region] = []
        preamble: list[str] = []
        current_name = ""
        current_lines: list[str] = []
        in_region = False

        for line in lines:
            self._log.log(TRACE, "Processing line: '%s'", line)
            stripped = line.lstrip()

            if stripped.startswith(self.start_marker):
                current_name = stripped[len(self.start_marker) :].strip()
                current_lines = []
                in_region = True
                self._log.debug("Starting region: '%s'", current_name)
                continue

            if stripped.startswith(self.end_marker):
                if in_region:
                    self._log.debug("Ending region: '%s' with %d lines", current_name, len(current_lines))
                    regions.append(Region(current_name, tuple(preamble) + tuple(current_lines)))
                    in_region = False
                continue

            if in_region:
                current_lines.append(line)
            else:
                preamble.append(line)

        if in_region:
            self._log.debug("Dropping unterminated region: '%s'", current_name)

        self._log.info("Found %d regions", len(regions))
        for region in regions:
            self._log.debug(
                "Region: '%s' with %d lines%sContent:%s%s",
                region.name,
                len(region.lines),
                os.linesep,
                os.linesep,
                region.to_source(),
            )

        return regions


def parse_regions(path: Path, logger: logging.Logger | None = None) -> list[Region]:
    """
    Convenience function to parse a file with the default markers.

    Args:
        path: File to parse
        logger: Optional logger to report progress to

    Returns:
        Regions in file order
    """
    return RegionParser(logger=logger).parse(path)
