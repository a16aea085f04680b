"""Configuration management for tabledef."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tabledef.exceptions import ConfigError

STATEMENTS = ("create", "alter")


def load_tabledefcfg(
    profile: str = "DEFAULT", path: Optional[Path] = None
) -> dict[str, str]:
    """Load settings from ~/.tabledefcfg.

    Args:
        profile: Profile name to load (default: "DEFAULT")
        path: Alternative config file location

    Returns:
        Dict with any of schema_path, statement and output

    Raises:
        ConfigError: If the profile doesn't exist
    """
    cfg_path = path or Path.home() / ".tabledefcfg"
    if not cfg_path.exists():
        return {}

    config = configparser.ConfigParser()
    config.read(cfg_path)

    if profile != "DEFAULT" and profile not in config:
        available = config.sections() or ["DEFAULT"]
        raise ConfigError(
            f"Profile '{profile}' not found in {cfg_path}. "
            f"Available profiles: {', '.join(available)}"
        )

    section = config[profile]
    result = {}
    for key in ("schema_path", "statement", "output"):
        if key in section:
            result[key] = section[key].strip()
    return result


@dataclass
class Config:
    """Configuration for tabledef."""

    schema_path: str = "schema/tables"
    statement: str = "create"
    output: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        *,
        schema_path: Optional[str] = None,
        statement: Optional[str] = None,
        output: Optional[str] = None,
        profile: Optional[str] = None,
        cfg_path: Optional[Path] = None,
    ) -> "Config":
        """Load configuration from ~/.tabledefcfg, env vars, with CLI overrides.

        Priority (highest to lowest):
        1. Explicit parameters (CLI args)
        2. Environment variables
        3. ~/.tabledefcfg profile
        4. Defaults
        """
        profile_name = profile or os.environ.get("TABLEDEF_PROFILE", "DEFAULT")
        tabledef_cfg = load_tabledefcfg(profile_name, cfg_path)

        def resolve(explicit, env_key, cfg_key):
            if explicit is not None:
                return explicit
            env_val = os.environ.get(env_key)
            if env_val is not None:
                return env_val
            return tabledef_cfg.get(cfg_key)

        defaults = cls()
        return cls(
            schema_path=resolve(schema_path, "TABLEDEF_SCHEMA_PATH", "schema_path")
            or defaults.schema_path,
            statement=resolve(statement, "TABLEDEF_STATEMENT", "statement")
            or defaults.statement,
            output=resolve(output, "TABLEDEF_OUTPUT", "output"),
        )

    def validate(self) -> None:
        """Check the configured values.

        Raises:
            ConfigError: If statement is not one of create/alter.
        """
        if self.statement not in STATEMENTS:
            raise ConfigError(
                f"Invalid statement '{self.statement}' "
                f"(use --statement or TABLEDEF_STATEMENT): "
                f"expected one of {', '.join(STATEMENTS)}"
            )
