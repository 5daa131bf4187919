"""Configuration management for the N-Queens search tools.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize benchmark settings, time limits and strategy defaults.

File format (high-level)
------------------------
- experiment_settings: board sizes, runs per strategy, base seed, output dir.
- timeout_settings: default time limit and per-strategy time limits.
- strategies: list of strategy names to benchmark, plus strategy options
  (e.g. ``heuristic_children``, ``debug_delay``).

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or run without --config to use the built-in defaults"
            )

        with open(self.config_path, "r") as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return benchmark settings (sizes, runs, base seed, output dir)."""
        return self.config.get("experiment_settings", {})

    def get_timeout_settings(self):
        """Return the default and per-strategy time limits."""
        return self.config.get("timeout_settings", {})

    def get_strategy_settings(self):
        """Return strategy options (selection, heuristic children, debug delay)."""
        return self.config.get("strategies", {})

    def get_selected_strategies(self):
        """Return the configured strategy names, or None for all of them."""
        return self.get_strategy_settings().get("selected")

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
