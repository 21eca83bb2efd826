"""Configuration model and loading for the Nitrado API extractor."""

from enum import Enum
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

CONFIG_FILENAME = ".nitrado-extractor.yaml"
DOTENV_FILENAME = ".env"

# Names too common to identify an operation on their own. Endpoints using one
# of these get path and group context prepended to their operation id.
DEFAULT_GENERIC_NAMES = [
    "Details",
    "List",
    "Create",
    "Update",
    "Delete",
    "Get",
    "Post",
    "Put",
    "Patch",
    "Restart",
    "Stop",
    "Start",
    "Info",
    "Status",
    "Check",
    "Add",
    "Remove",
    "Set",
    "Generate",
    "Enable",
    "Disable",
    "Send",
    "Receive",
    "Upload",
    "Download",
]


class FileFormat(Enum):
    """Enum representing the format of a specification file."""

    JSON = "json"
    YAML = "yaml"


class ConverterConfig(BaseModel):
    """Configuration model for the extractor and converter."""

    api_data_url: str | None = Field(default=None, description="URL of the apiDoc api_data.js")
    output_dir: str = Field(default="./output", description="Directory for generated files")
    server_url: str = "https://api.nitrado.net"
    server_description: str = "Nitrado API Server"
    api_title: str = "Nitrado API"
    api_description: str = (
        "Official Nitrado API for managing game servers, domains, and other services"
    )
    api_version: str = "1.0.0"
    contact_name: str = "Nitrado Support"
    contact_url: str = "https://nitrado.net/support"
    license_name: str = "Proprietary"
    license_url: str = "https://nitrado.net/terms"
    output_format: FileFormat = FileFormat.JSON
    generic_names: list[str] = Field(default_factory=lambda: list(DEFAULT_GENERIC_NAMES))
    verbose: bool = False
    dry_run: bool = False


def get_config_path(target_dir: Path) -> Path:
    """Get the path to the config file in the target directory."""
    return target_dir / CONFIG_FILENAME


def load_config(config_path: Path) -> ConverterConfig:
    """
    Load configuration from a YAML file.
    Returns the default config if the file doesn't exist.
    """
    if not config_path.exists():
        return ConverterConfig()
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return ConverterConfig(**data)


def resolve_config(config_file: Path | None = None, **overrides) -> ConverterConfig:
    """
    Build the effective configuration.

    Values are layered as defaults, then the YAML config file, then the
    explicit overrides (CLI options and environment variables). Overrides
    that are None are ignored so an unset option never masks the file.

    Args:
        config_file: Path to a YAML config file; defaults to
            .nitrado-extractor.yaml in the current working directory
        **overrides: Field values taking precedence over the file

    Returns:
        The merged ConverterConfig
    """
    if config_file is None:
        config_file = get_config_path(Path.cwd())
    elif not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    base = load_config(config_file)
    updates = {key: value for key, value in overrides.items() if value is not None}
    return ConverterConfig(**{**base.model_dump(), **updates})


def load_env(dotenv_path: Path | None = None) -> bool:
    """
    Load NITRADO_* defaults from a .env file, if present.

    Variables that are already set are not overridden.

    Args:
        dotenv_path: File to read; defaults to .env in the current working directory

    Returns:
        True if the file existed and was read
    """
    if dotenv_path is None:
        dotenv_path = Path.cwd() / DOTENV_FILENAME
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True
