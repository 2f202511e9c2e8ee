"""Configuration management for genpair."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...domain.models import GenerationRequest, Style


@dataclass
class Config:
    """Resolved options for a single genpair run."""

    namespace: str
    class_name: str
    style: Style = Style.CPP
    output_dir: Path = Path(".")
    verbose: bool = False
    log_dir: Optional[Path] = None

    @classmethod
    def from_args(
        cls,
        namespace: str,
        class_name: str,
        style: Optional[str] = None,
        output_dir: Optional[Path] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to defaults.

        Args:
            namespace: Namespace for the guard and namespace block
            class_name: Class name, also the base filename
            style: Style name; unknown or missing names resolve to cpp
            output_dir: Output directory (default: current directory)
            verbose: Enable verbose output
            log_dir: Directory for the debug log file (default: no log file)

        Returns:
            Config object
        """
        config = cls(
            namespace=namespace,
            class_name=class_name,
            style=Style.from_name(style),
        )

        if output_dir is not None:
            config.output_dir = output_dir
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.namespace:
            raise ValueError("Namespace must not be empty")

        if not self.class_name:
            raise ValueError("Class name must not be empty")

        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ValueError(f"Not a directory: {self.output_dir}")

    def to_request(self) -> GenerationRequest:
        """Build the generation request described by this configuration."""
        return GenerationRequest(
            namespace_name=self.namespace,
            class_name=self.class_name,
            style=self.style,
        )

    def ensure_log_dir(self) -> None:
        """Create the log directory if one is configured and doesn't exist."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
