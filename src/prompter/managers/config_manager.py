"""
Config Manager

Loads prompt options from YAML: global defaults plus named presets.
Supports an include: directive so options can be split across files.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from prompter.models.config import PromptConfig
from prompter.models.errors import ConfigurationError
from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


class ConfigManager:
    """
    YAML-backed prompt configuration

    File layout:
        defaults:            # applied to every prompt
          duration: 500
        presets:             # named option sets layered over defaults
          terminal:
            cursor: "_"
            loop: true

    or, split across files:
        include:
          - defaults.yaml
          - presets.yaml

    Example:
        config = ConfigManager("prompts.yaml")
        config.load()

        cfg = config.get_preset("terminal")
        cfg = config.build_config("terminal", duration=900)
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        defaults_path: Optional[Union[str, Path]] = None
    ):
        """
        Args:
            config_path: Main YAML file (None = factory defaults only)
            defaults_path: Fallback YAML used when the main file can't be loaded
        """
        self.config_path = Path(config_path) if config_path else None
        self.factory_defaults_path = Path(defaults_path) if defaults_path else PACKAGE_CONFIG_DIR / "factory_defaults.yaml"
        self.data: Dict[str, Any] = {}

        # Built in load()
        self.defaults: PromptConfig = PromptConfig()
        self.presets: Dict[str, PromptConfig] = {}

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration

        Process:
        1. Load main file (if given)
        2. If it has an 'include:' list, load and merge those files
        3. Fall back to factory defaults when the main file is missing or unreadable
        4. Build PromptConfig defaults and presets

        Returns:
            Merged config data dict

        Raises:
            ConfigurationError: an option in the loaded data is invalid
        """
        if self.config_path is None:
            self.data = self._read(self.factory_defaults_path)
        else:
            try:
                main_config = self._read(self.config_path)
                if "include" in main_config:
                    log.info("Using include-based configuration")
                    self.data = self._load_with_includes(main_config["include"], self.config_path.parent)
                else:
                    self.data = main_config
            except (OSError, yaml.YAMLError) as ex:
                log.error(f"Failed to load {self.config_path.name}", error=str(ex), error_type=type(ex).__name__)
                log.warn("Falling back to factory defaults")
                self.data = self._read(self.factory_defaults_path)

        self._build_configs()
        return self.data

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files; later files override earlier keys.
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            file_data = self._read(config_dir / filename)
            if file_data:
                merged.update(file_data)
                log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))

        log.info("Config merge complete", total_keys=len(merged))
        return merged

    def _build_configs(self) -> None:
        defaults_raw = self.data.get("defaults") or {}
        if not isinstance(defaults_raw, dict):
            raise ConfigurationError("defaults", "must be a mapping", defaults_raw)
        self.defaults = PromptConfig.from_dict(defaults_raw)

        presets_raw = self.data.get("presets") or {}
        if not isinstance(presets_raw, dict):
            raise ConfigurationError("presets", "must be a mapping", presets_raw)

        self.presets = {}
        for name, options in presets_raw.items():
            if not isinstance(options, dict):
                raise ConfigurationError(f"presets.{name}", "must be a mapping", options)
            self.presets[name] = self.defaults.merged(options)

        log.info(f"Loaded {len(self.presets)} prompt presets", presets=str(list(self.presets)))

    # ===== Access API =====

    def get_preset(self, name: str) -> PromptConfig:
        """
        Raises:
            ConfigurationError: unknown preset
        """
        preset = self.presets.get(name)
        if preset is None:
            raise ConfigurationError("preset", f"unknown preset '{name}'", name)
        return preset

    def build_config(self, preset: Optional[str] = None, **overrides) -> PromptConfig:
        """Defaults (or a preset) with keyword overrides applied."""
        base = self.get_preset(preset) if preset else self.defaults
        return base.merged(overrides)
