#!/usr/bin/env python3

"""Header/source pair generation.

Computes the target filenames for a request, refuses to touch anything if
either target already exists, then writes the header followed by the source.
A header written before a failing source write is left on disk.
"""

from pathlib import Path

from ....infrastructure.logging import get_logger
from ...errors import FileCreateError, TargetExistsError
from ...models import GenerationRequest
from .templates import render_header, render_source

logger = get_logger(__name__)


class FilePairGenerator:
    """Writes a matched header/source pair into an output directory."""

    def __init__(self, output_dir: Path = Path(".")) -> None:
        """Initialize generator.

        Args:
            output_dir: Directory the pair is written to
        """
        self.output_dir = output_dir

    def target_paths(self, request: GenerationRequest) -> tuple[Path, Path]:
        """Return (header path, source path) for the request."""
        return (
            self.output_dir / request.header_file_name,
            self.output_dir / request.source_file_name,
        )

    def check_targets_available(self, request: GenerationRequest) -> None:
        """Pre-flight check that neither target exists.

        Raises:
            TargetExistsError: If the header or the source file already exists
        """
        existing = [path for path in self.target_paths(request) if path.exists()]
        if existing:
            raise TargetExistsError(existing)

    def generate(self, request: GenerationRequest) -> tuple[Path, Path]:
        """Generate the header and source files for a request.

        Args:
            request: Namespace, class name and style to generate

        Returns:
            Paths of the written header and source files

        Raises:
            TargetExistsError: If either target exists; nothing is written
            FileCreateError: If a file cannot be opened or written
        """
        header_path, source_path = self.target_paths(request)
        logger.debug(f"Targets: {header_path}, {source_path} (style: {request.style.value})")

        self.check_targets_available(request)

        self._write(header_path, render_header(request))
        logger.info(f"Created header: {header_path}")

        self._write(source_path, render_source(request))
        logger.info(f"Created source: {source_path}")

        return header_path, source_path

    @staticmethod
    def _write(path: Path, content: str) -> None:
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as e:
            raise FileCreateError(path, e.strerror or str(e)) from e
