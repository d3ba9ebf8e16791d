"""GraphQL to Code Generator

Runs graphql-codegen on a directory of GraphQL documents and splits the
single generated C# file into a models file plus one file per operation.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGenerator,
    CommandExecutionError,
    CommandExecutor,
    GeneratedFileNotFoundError,
    GenerationError,
    GeneratorConfig,
    Region,
    RegionEmitter,
    RegionParser,
    parse_regions,
)

__all__ = [
    "CodeGenerator",
    "GeneratorConfig",
    "Region",
    "RegionParser",
    "RegionEmitter",
    "parse_regions",
    "CommandExecutor",
    "GenerationError",
    "GeneratedFileNotFoundError",
    "CommandExecutionError",
]
