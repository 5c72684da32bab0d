"""
Pydantic-based configuration system for the Bookmark Mind-Map Organizer.

Settings can come from a TOML or JSON file, from environment variables and
from command-line arguments, in increasing order of precedence.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Type

import toml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class HierarchyParams(BaseModel):
    """Depth and breadth limits of the generated tree."""

    model_config = ConfigDict(frozen=True)

    vertical_complexity: int = Field(
        default=4,
        ge=2,
        le=8,
        description="Maximum tree depth from root to bookmark",
        json_schema_extra={
            "error_msg": "Vertical complexity must be between 2 and 8 levels."
        },
    )
    horizontal_complexity: int = Field(
        default=8,
        ge=3,
        le=15,
        description="Maximum number of branches per level",
        json_schema_extra={
            "error_msg": "Horizontal complexity must be between 3 and 15 branches."
        },
    )


class ExportOptions(BaseModel):
    """Which node kinds end up in the exported document."""

    model_config = ConfigDict(frozen=True)

    include_bookmarks: bool = Field(default=True, description="Export bookmarks")
    include_folders: bool = Field(default=True, description="Export folders")

    @property
    def variant_tag(self) -> str:
        """Short tag describing the export variant, used in filenames."""
        if self.include_bookmarks and self.include_folders:
            return "full"
        if self.include_folders:
            return "folders-only"
        if self.include_bookmarks:
            return "flattened"
        return "empty"


class GroupingConfig(BaseModel):
    """Sub-grouping settings."""

    dominance_mode: Literal["literal", "relative"] = Field(
        default="literal",
        description="How the dominant domain threshold is computed",
        json_schema_extra={
            "error_msg": "Dominance mode must be 'literal' or 'relative'. "
            "'literal' makes every domain with 2+ bookmarks dominant; "
            "'relative' compares against the size of the branch being split."
        },
    )
    dominance_ratio: float = Field(
        default=0.15,
        gt=0.0,
        le=1.0,
        description="Share used by the dominant domain threshold",
    )


class OutputConfig(BaseModel):
    """Output document settings."""

    root_label: str = Field(default="Bookmarks", min_length=1)
    filename_prefix: str = Field(default="bookmarks_reorganized", min_length=1)

    @field_validator("filename_prefix")
    @classmethod
    def validate_filename_prefix(cls, v):
        """Reject characters that cannot appear in a filename."""
        if any(char in v for char in '<>:"/\\|?*'):
            raise ValueError(f"Filename prefix contains invalid characters: {v}")
        return v


class MindMapConfig(BaseModel):
    """Main configuration model."""

    hierarchy: HierarchyParams = Field(default_factory=HierarchyParams)
    export: ExportOptions = Field(default_factory=ExportOptions)
    grouping: GroupingConfig = Field(default_factory=GroupingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


ENV_OVERRIDES = {
    "MINDMAP_VERTICAL_COMPLEXITY": ("hierarchy", "vertical_complexity"),
    "MINDMAP_HORIZONTAL_COMPLEXITY": ("hierarchy", "horizontal_complexity"),
    "MINDMAP_DOMINANCE_MODE": ("grouping", "dominance_mode"),
}


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[MindMapConfig] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> list[Path]:
        """Get list of default configuration file paths to try."""
        if getattr(sys, "frozen", False):
            app_dir = Path(sys.executable).parent
            return [
                app_dir / "config" / "user_config.toml",
                app_dir / "config" / "user_config.json",
                app_dir / "mindmap_config.toml",
                app_dir / "mindmap_config.json",
            ]

        config_dir = Path(__file__).parent
        project_root = config_dir.parent.parent
        return [
            config_dir / "user_config.toml",
            config_dir / "user_config.json",
            project_root / "mindmap_config.toml",
            project_root / "mindmap_config.json",
        ]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict[str, Any] = {}

        if config_path:
            try:
                config_data = self._load_config_file(Path(config_path))
            except FileNotFoundError as e:
                raise ValueError(format_config_error(e))
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    break

        self._load_overrides_from_env(config_data)

        try:
            self._config = MindMapConfig(**config_data)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        try:
            if suffix == ".toml":
                return toml.load(config_path)
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (toml.TomlDecodeError, json.JSONDecodeError, OSError) as e:
            raise ValueError(f"Failed to load configuration from {config_path}: {e}")

    def _load_overrides_from_env(self, config_data: Dict) -> None:
        """Apply environment variable overrides."""
        for env_var, (section, option) in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value:
                config_data.setdefault(section, {})[option] = value

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("vertical_complexity") is not None:
            config_dict["hierarchy"]["vertical_complexity"] = args["vertical_complexity"]
        if args.get("horizontal_complexity") is not None:
            config_dict["hierarchy"]["horizontal_complexity"] = args["horizontal_complexity"]

        if args.get("no_bookmarks"):
            config_dict["export"]["include_bookmarks"] = False
        if args.get("no_folders"):
            config_dict["export"]["include_folders"] = False

        if args.get("dominance_mode"):
            config_dict["grouping"]["dominance_mode"] = args["dominance_mode"]

        try:
            self._config = MindMapConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    @property
    def config(self) -> MindMapConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    def create_sample_config(self, output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = MindMapConfig().model_dump()

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


def field_error_hint(location: tuple, model: Type[BaseModel] = MindMapConfig) -> Optional[str]:
    """
    Look up the ``error_msg`` guidance declared on the field at ``location``.

    Example:
        >>> field_error_hint(("hierarchy", "vertical_complexity"))
        'Vertical complexity must be between 2 and 8 levels.'
    """
    field_info = None
    current: Optional[Type[BaseModel]] = model

    for part in location:
        if current is None or not isinstance(part, str):
            return None
        field_info = current.model_fields.get(part)
        if field_info is None:
            return None
        annotation = field_info.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            current = annotation
        else:
            current = None

    extra = field_info.json_schema_extra if field_info else None
    if isinstance(extra, dict):
        return extra.get("error_msg")
    return None


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message with helpful guidance
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            message = ConfigurationErrorFormatter._format_by_error_type(
                location,
                error_detail["type"],
                error_detail,
                error_detail.get("input", "N/A"),
            )
            hint = field_error_hint(error_detail["loc"])
            if hint:
                message += f"\n  {hint}"
            error_messages.append(message)

        header = "Configuration Validation Failed:\n"
        separator = "-" * 60 + "\n"
        footer = (
            "\n\nTips:\n"
            "- Check the configuration file format (TOML or JSON)\n"
            "- Vertical complexity must be within 2-8, horizontal within 3-15"
        )

        return header + separator + "\n".join(error_messages) + footer

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return " -> ".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""
        if error_type == "missing":
            return f"{location}: Required field is missing"

        if error_type in (
            "greater_than_equal",
            "less_than_equal",
            "greater_than",
            "less_than",
        ):
            ctx = error_detail.get("ctx", {})
            limit = next(iter(ctx.values()), "limit")
            operator = {
                "greater_than_equal": ">=",
                "less_than_equal": "<=",
                "greater_than": ">",
                "less_than": "<",
            }[error_type]
            return f"{location}: Value must be {operator} {limit} (got: {input_value})"

        if error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"{location}: Must be one of {expected} (got: {input_value})"

        msg = error_detail.get("msg", "Invalid configuration value")
        return f"{location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    if isinstance(error, FileNotFoundError):
        return (
            f"Configuration File Not Found:\n"
            f"{error}\n\n"
            f"Use default configuration by omitting the --config parameter"
        )

    return f"Configuration Error:\n{error}"
