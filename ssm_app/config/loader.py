"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, get_default_config

CONFIG_FILENAME = "market.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from market.yaml, empty if the file is absent."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        return file_config or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. market.yaml in the config directory
        3. Global defaults (lowest priority)

        Raises:
            ValueError: If a layer names a section or parameter the defaults
                do not define, so a misspelt key cannot be silently ignored
        """
        config = asdict(self.defaults)

        config = self._apply_layer(config, self.load_file_config(), CONFIG_FILENAME)

        if overrides:
            config = self._apply_layer(config, overrides, "overrides")

        return config

    @staticmethod
    def _apply_layer(base: dict[str, Any], layer: dict[str, Any], source: str) -> dict[str, Any]:
        """Overlay one layer of ``section -> {param: value}`` onto ``base``."""
        if not isinstance(layer, dict):
            raise ValueError(f"{source}: expected a mapping of sections, got {type(layer).__name__}")

        result = {section: dict(params) for section, params in base.items()}

        for section, params in layer.items():
            if section not in result:
                raise ValueError(f"{source}: unknown configuration section '{section}'")
            if not isinstance(params, dict):
                raise ValueError(f"{source}: section '{section}' must be a mapping")

            unknown = sorted(set(params) - set(result[section]))
            if unknown:
                raise ValueError(f"{source}: unknown {section} parameters: {', '.join(unknown)}")

            result[section].update(params)

        return result
