"""Configuration loader for taskpaper.toml."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

OUTPUT_FORMATS = ("outline", "json", "yaml")


@dataclass
class ParseConfig:
    """Parsing configuration."""
    normalize: bool = False


@dataclass
class OutputConfig:
    """Tree dump configuration."""
    format: str = "outline"
    indent: int = 2


@dataclass
class TaskPaperConfig:
    """Complete taskpaper configuration."""
    parse: ParseConfig
    output: OutputConfig
    path: Path | None = None  # file the settings were read from, if any


def load_config(config_path: Path | None = None, document_path: Path | None = None) -> TaskPaperConfig:
    """
    Load configuration from taskpaper.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/taskpaper.toml
    3. <directory of document_path>/taskpaper.toml

    Args:
        config_path: Explicit path to config file
        document_path: Document being processed, for fallback search

    Returns:
        TaskPaperConfig with resolved settings

    Raises:
        FileNotFoundError: if config_path is given but does not exist
        ValueError: if output.format is not a known format
    """
    toml_data: dict[str, Any] = {}
    found: Path | None = None

    if config_path and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # Search for config file
    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / "taskpaper.toml")
    if document_path:
        search_paths.append(document_path.parent / "taskpaper.toml")

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            found = path
            break

    # Parse parse config
    parse_data = toml_data.get("parse", {})
    parse_config = ParseConfig(
        normalize=bool(parse_data.get("normalize", False)),
    )

    # Parse output config
    output_data = toml_data.get("output", {})
    output_config = OutputConfig(
        format=output_data.get("format", "outline"),
        indent=int(output_data.get("indent", 2)),
    )
    if output_config.format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format {output_config.format!r} "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )

    return TaskPaperConfig(
        parse=parse_config,
        output=output_config,
        path=found,
    )
