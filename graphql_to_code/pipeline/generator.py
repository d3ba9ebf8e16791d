"""
End-to-end generation run.

Copies the *.graphql documents next to the output, runs graphql-codegen
through pnpm, then splits the single generated file into one file per region.
"""

from __future__ import annotations

import logging
import shutil

from .config import GeneratorConfig
from .emitter import RegionEmitter
from .errors import GeneratedFileNotFoundError
from .executor import CommandExecutor, SubprocessCommandExecutor
from .regions import RegionParser

LOG = logging.getLogger(__name__)

GRAPHQL_PATTERN = "*.graphql"


class CodeGenerator:
    """Runs the generation pipeline for one configuration.

    Not safe to run concurrently against the same output directory.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        executor: CommandExecutor | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self._log = logger or LOG
        self._executor = executor or SubprocessCommandExecutor(logger=self._log)

    def generate(self) -> None:
        """
        Run the whole pipeline.

        Raises:
            CommandExecutionError: If an external command fails
            GeneratedFileNotFoundError: If graphql-codegen produced no file
        """
        self._log.info("Starting code generation...")

        self.ensure_directories_exist()
        self.clean_working_directory()
        self.copy_graphql_files()
        self.run_codegen()
        self.process_regions()
        self.clean_working_directory()

        self._log.info("Code generation completed successfully.")

    def ensure_directories_exist(self) -> None:
        self._log.debug("Ensuring directory exists: %s", self.config.output_path)
        self.config.output_path.mkdir(parents=True, exist_ok=True)

    def clean_working_directory(self) -> None:
        """Remove copied documents and the intermediate file, if any."""
        self._log.debug("Cleaning working directory...")
        for path in self.config.output_path.glob(GRAPHQL_PATTERN):
            if not path.is_file():
                continue
            self._log.debug("Deleting GraphQL file: %s", path)
            path.unlink()

        generated = self.config.generated_file_path
        if generated.exists():
            self._log.debug("Deleting existing %s: %s", generated.name, generated)
            generated.unlink()

    def copy_graphql_files(self) -> None:
        """Copy documents found anywhere under the input path, flattened."""
        self._log.debug("Copying GraphQL files from %s to %s", self.config.input_path, self.config.output_path)
        for source in sorted(self.config.input_path.rglob(GRAPHQL_PATTERN)):
            if not source.is_file():
                continue
            destination = self.config.output_path / source.name
            if destination.exists() and destination.samefile(source):
                continue
            self._log.debug("Copying %s to %s", source, destination)
            shutil.copyfile(source, destination)

    def codegen_arguments(self) -> list[str]:
        """Arguments for the ``pnpm graphql-codegen`` invocation."""
        args = [
            "graphql-codegen",
            "--schema",
            self.config.schema_url,
            "--template",
            self.config.template,
            "--out",
            str(self.config.output_path),
        ]
        for key, value in self.config.headers.items():
            args.extend(["--header", f"{key}: {value}"])
        args.append(str(self.config.output_path / GRAPHQL_PATTERN))
        return args

    def run_codegen(self) -> None:
        self._log.info("Starting code generation process...")

        self._log.info("Installing pnpm...")
        self._executor.execute("npm", ["install", "-g", "pnpm"])

        self._log.info("Installing GraphQL CodeGen dependencies...")
        self._executor.execute("pnpm", ["install", *self.config.packages])

        args = self.codegen_arguments()
        self._log.debug("Executing GraphQL CodeGen with args: %s", args)
        self._executor.execute("pnpm", args)

        generated = self.config.generated_file_path
        self._log.debug("Checking for %s at %s. Exists: %s", generated.name, generated, generated.exists())

    def process_regions(self) -> None:
        """Split the intermediate file into the model file and region files."""
        generated = self.config.generated_file_path
        self._log.debug("Processing regions from %s", generated)

        if not generated.exists():
            self._log.error("Generated %s file not found at %s", generated.name, generated)
            raise GeneratedFileNotFoundError(generated)

        regions = RegionParser(logger=self._log).parse(generated)
        self._log.debug("Found %d regions", len(regions))

        RegionEmitter(self.config, logger=self._log).emit(regions)
