"""
Pipeline - GraphQL code generation and region splitting.

1. Copy *.graphql documents into the output directory
2. Run graphql-codegen through an injectable command executor
3. Parse the generated file into regions
4. Emit the model file and one file per region, with text fixes applied
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import GeneratorConfig
from .emitter import MODEL_REGION_NAME, RESERVED_REGION_NAMES, RegionEmitter
from .errors import CommandExecutionError, GeneratedFileNotFoundError, GenerationError
from .executor import CommandExecutor, CommandResult, SubprocessCommandExecutor
from .generator import CodeGenerator
from .regions import Region, RegionParser, parse_regions

__all__ = [
    "CodeGenerator",
    "GeneratorConfig",
    "Region",
    "RegionParser",
    "parse_regions",
    "RegionEmitter",
    "MODEL_REGION_NAME",
    "RESERVED_REGION_NAMES",
    "CommandExecutor",
    "CommandResult",
    "SubprocessCommandExecutor",
    "GenerationError",
    "GeneratedFileNotFoundError",
    "CommandExecutionError",
    "AtomicWriter",
]
