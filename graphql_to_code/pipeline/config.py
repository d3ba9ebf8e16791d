"""
Configuration for the GraphQL code generation pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PACKAGES = ["@graphql-codegen/cli", "@graphql-codegen/typescript"]


@dataclass
class GeneratorConfig:
    """Configuration options for a generation run."""

    # URL of the GraphQL schema
    schema_url: str = ""

    # Directory searched recursively for *.graphql files
    input_path: Path = field(default_factory=Path)

    # Directory receiving the generated files
    output_path: Path = field(default_factory=Path)

    # Namespace replacing the generator's "Generated" namespace
    base_namespace: str = "Generated"

    # Headers sent with the schema request
    headers: dict[str, str] = field(default_factory=dict)

    # Template passed to graphql-codegen
    template: str = "typescript"

    # Name of the file receiving the "input types" region
    model_file: str = "Models.cs"

    # Name of the single file written by the external generator
    generated_file: str = "Classes.cs"

    # Extension of the per-region files
    extension: str = ".cs"

    # npm packages installed before running the generator
    packages: list[str] = field(default_factory=lambda: list(DEFAULT_PACKAGES))

    def __post_init__(self):
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)

    @property
    def generated_file_path(self) -> Path:
        return self.output_path / self.generated_file

    @property
    def model_file_path(self) -> Path:
        return self.output_path / self.model_file

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.input_path = Path(config.input_path)
        config.output_path = Path(config.output_path)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "schema_url": self.schema_url,
            "input_path": str(self.input_path),
            "output_path": str(self.output_path),
            "base_namespace": self.base_namespace,
            "headers": dict(self.headers),
            "template": self.template,
            "model_file": self.model_file,
            "generated_file": self.generated_file,
            "extension": self.extension,
            "packages": list(self.packages),
        }
