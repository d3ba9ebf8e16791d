"""
Emission of parsed regions as standalone source files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .atomic_writer import AtomicWriter
from .config import GeneratorConfig
from .regions import Region

LOG = logging.getLogger(__name__)

# Region holding the input types, written to the model file
MODEL_REGION_NAME = "input types"

# Regions never written as <name>.generated.<ext>
RESERVED_REGION_NAMES = frozenset({"fragments", MODEL_REGION_NAME, "Query"})

GENERATED_NAMESPACE = "namespace Generated"

# Fixes for known defects in the generator output
TEXT_FIXES = (
    ("using Agoda.CodeGen.GraphQL", "using Agoda.Graphql.Client"),
    ("</sumary>", "</summary>"),
)


class RegionEmitter:
    """Writes the model file and one file per non-reserved region."""

    def __init__(
        self,
        config: GeneratorConfig,
        writer: AtomicWriter | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self._writer = writer or AtomicWriter()
        self._log = logger or LOG

    def render(self, region: Region) -> str:
        """Render a region and apply the namespace and text fixes."""
        content = region.to_source().replace(GENERATED_NAMESPACE, f"\nnamespace {self.config.base_namespace}")
        for old, new in TEXT_FIXES:
            content = content.replace(old, new)
        return content

    def region_file_name(self, region: Region) -> str:
        return f"{region.name}.generated{self.config.extension}"

    def emit(self, regions: Iterable[Region]) -> list[Path]:
        """
        Write the files for the given regions.

        Duplicate region names map to the same file, so the last one wins.

        Args:
            regions: Regions in parse order

        Returns:
            Paths written, in write order
        """
        regions = list(regions)
        written = []

        models = next((r for r in regions if r.name == MODEL_REGION_NAME), None)
        if models is not None:
            self._log.info("Generating models file at %s", self.config.model_file_path)
            written.append(self._write(self.config.model_file, models))
        else:
            self._log.warning("No input types region found")

        for region in regions:
            if region.name in RESERVED_REGION_NAMES:
                continue
            file_name = self.region_file_name(region)
            self._log.info("Generating file for region %s at %s", region.name, file_name)
            written.append(self._write(file_name, region))

        return written

    def _write(self, file_name: str, region: Region) -> Path:
        path = self.config.output_path / file_name
        self._log.debug("Generating file at %s", path)
        self._writer.write(path, self.render(region))
        self._log.debug("File generated successfully at %s", path)
        return path
