"""Runtime configuration, read once from the environment and command line."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .exceptions import ConfigurationError
from .labels import DEFAULT_IMPORTED_LABEL, DEFAULT_MIGRATED_LABEL
from .models import RepoRef

logger: logging.Logger = logging.getLogger(__name__)

ENV_PREFIX: Final[str] = "MIGRATRON_"


@dataclass(frozen=True)
class MigratronConfig:
    """Settings shared by every step of a migration run."""

    from_repo: RepoRef
    to_repo: RepoRef
    login: str
    token: str | None = None
    migrated_label: str = DEFAULT_MIGRATED_LABEL
    imported_label: str = DEFAULT_IMPORTED_LABEL


def get_env(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Get MIGRATRON_<name> from the environment, ignoring case."""
    env = os.environ if environ is None else environ
    wanted = f"{ENV_PREFIX}{name}".upper()
    for key, value in env.items():
        if key.upper() == wanted:
            return value
    return None


def load_config(
    *,
    login: str | None,
    migrated_label: str = DEFAULT_MIGRATED_LABEL,
    imported_label: str = DEFAULT_IMPORTED_LABEL,
    environ: Mapping[str, str] | None = None,
) -> MigratronConfig:
    """Build the configuration from command-line values and the environment.

    Raises:
        ConfigurationError: If the login is missing or a repository is not in owner/name format
    """
    if not login:
        msg = "--login must be set!"
        raise ConfigurationError(msg)

    repos: dict[str, RepoRef] = {}
    for name in ("FROM_REPO", "TO_REPO"):
        env_name = f"{ENV_PREFIX}{name}"
        value = get_env(name, environ)
        if value is None:
            msg = f"{env_name} env is not set. Expected format: 'owner/repository'"
            raise ConfigurationError(msg)
        repos[name] = RepoRef.parse(value, source=f"{env_name} env")

    token = get_env("TOKEN", environ)
    if not token:
        logger.warning(f"No {ENV_PREFIX}TOKEN set, using anonymous GitHub access")
        token = None

    return MigratronConfig(
        from_repo=repos["FROM_REPO"],
        to_repo=repos["TO_REPO"],
        login=login,
        token=token,
        migrated_label=migrated_label,
        imported_label=imported_label,
    )
