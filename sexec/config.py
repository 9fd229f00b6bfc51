"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Command-line flags (--store)
  2. Environment variables (SE_STORE_PATH, SE_SHELL)
  3. User config (~/.se/config.yaml, or --config / SE_CONFIG)
  4. Defaults
"""

import os
import sys
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .presentation.symbols import get_symbols


SE_HOME = Path.home() / ".se"

DEFAULT_STORE_PATH = str(SE_HOME / "commands.json")
DEFAULT_HISTORY_FILE = str(SE_HOME / "history")
DEFAULT_PROMPT = "se > "
DEFAULT_HISTORY_LENGTH = 1000


@dataclass
class StoreConfig:
    """Where saved commands live."""
    path: str = DEFAULT_STORE_PATH

    @property
    def resolved_path(self) -> Path:
        return Path(self.path).expanduser()

    def validate(self) -> Optional[str]:
        if not self.path:
            return "Store path cannot be empty."
        return None


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"

    def validate(self) -> Optional[str]:
        valid_symbols = ("unicode", "ascii", "auto")
        if self.symbols not in valid_symbols:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(valid_symbols)}"
        return None


@dataclass
class ReplConfig:
    """Interactive shell preferences."""
    prompt: str = DEFAULT_PROMPT
    history_file: Optional[str] = DEFAULT_HISTORY_FILE  # None = no history file
    history_length: int = DEFAULT_HISTORY_LENGTH

    @property
    def resolved_history_file(self) -> Optional[Path]:
        if not self.history_file:
            return None
        return Path(self.history_file).expanduser()

    def validate(self) -> Optional[str]:
        if not isinstance(self.history_length, int) or self.history_length < 0:
            return f"Invalid history_length '{self.history_length}'. Use a non-negative integer."
        return None


@dataclass
class ExecutionConfig:
    """How saved commands are executed."""
    shell: Optional[str] = None  # None = system default (/bin/sh)

    def validate(self) -> Optional[str]:
        if self.shell is not None and not self.shell.strip():
            return "Shell cannot be blank. Remove the setting to use the system shell."
        return None


@dataclass
class Config:
    """Application configuration."""
    store: StoreConfig = field(default_factory=StoreConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    repl: ReplConfig = field(default_factory=ReplConfig)
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "store": {"path": self.store.path},
            "display": {"symbols": self.display.symbols},
            "repl": {
                "prompt": self.repl.prompt,
                "history_file": self.repl.history_file,
                "history_length": self.repl.history_length,
            },
            "execution": {"shell": self.execution.shell},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        store_data = data.get("store") or {}
        display_data = data.get("display") or {}
        repl_data = data.get("repl") or {}
        execution_data = data.get("execution") or {}

        return cls(
            store=StoreConfig(
                path=store_data.get("path", DEFAULT_STORE_PATH)
            ),
            display=DisplayConfig(
                symbols=display_data.get("symbols", "auto")
            ),
            repl=ReplConfig(
                prompt=repl_data.get("prompt", DEFAULT_PROMPT),
                history_file=repl_data.get("history_file", DEFAULT_HISTORY_FILE),
                history_length=repl_data.get("history_length", DEFAULT_HISTORY_LENGTH),
            ),
            execution=ExecutionConfig(
                shell=execution_data.get("shell")
            ),
        )

    def validate(self) -> Optional[str]:
        """First validation error across all sections, or None."""
        for section in (self.store, self.display, self.repl, self.execution):
            error = section.validate()
            if error:
                return error
        return None


class ConfigManager:
    """
    Manages configuration loading.

    Hierarchy:
      1. Environment overrides
      2. User config (~/.se/config.yaml)
      3. Defaults
    """

    USER_CONFIG_FILE = SE_HOME / "config.yaml"

    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None and os.environ.get("SE_CONFIG"):
            config_path = Path(os.environ["SE_CONFIG"])
        self.config_path = Path(config_path).expanduser() if config_path else self.USER_CONFIG_FILE
        self._config: Optional[Config] = None

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        if self.config_path.exists():
            try:
                with open(self.config_path) as f:
                    user_data = yaml.safe_load(f) or {}
                if isinstance(user_data, dict):
                    config_data = self._merge(config_data, user_data)
                else:
                    print(f"Warning: Ignoring {self.config_path}: expected a mapping", file=sys.stderr)
            except (OSError, yaml.YAMLError) as e:
                print(f"Warning: Ignoring malformed config {self.config_path}: {e}", file=sys.stderr)

        # Layer 2: Environment overrides
        if os.environ.get("SE_STORE_PATH"):
            config_data.setdefault("store", {})["path"] = os.environ["SE_STORE_PATH"]
        if os.environ.get("SE_SHELL"):
            config_data.setdefault("execution", {})["shell"] = os.environ["SE_SHELL"]

        self._config = Config.from_dict(config_data)
        return self._config

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)

        file_status = (
            f"{symbols.check_pass} {self.config_path}"
            if self.config_path.exists()
            else f"{self.config_path} (not found, using defaults)"
        )

        lines = [
            "Configuration:",
            "",
            "Store:",
            f"  Path: {config.store.resolved_path}",
            "",
            "Display:",
            f"  Symbols: {config.display.symbols}",
            "",
            "REPL:",
            f"  Prompt: \"{config.repl.prompt}\"",
            f"  History file: {config.repl.resolved_history_file or '(disabled)'}",
            f"  History length: {config.repl.history_length}",
            "",
            "Execution:",
            f"  Shell: {config.execution.shell or '(system default)'}",
            "",
            "Config file:",
            f"  {file_status}",
        ]

        return "\n".join(lines)


# Convenience function
def get_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration."""
    return ConfigManager(config_path).load()
