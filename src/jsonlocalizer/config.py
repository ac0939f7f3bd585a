"""Configuration for JsonStringLocalizerFactory.

Provides a single frozen dataclass carrying everything the factory needs
from its host: the application name, the resources path relative to the
content root, and the content root itself. Values are validated once at
construction time so that misconfiguration fails at startup rather than on
the first lookup.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from jsonlocalizer.constants import PATH_JOIN_CHAR

__all__ = ["ENV_APPLICATION_NAME", "ENV_CONTENT_ROOT", "ENV_RESOURCES_PATH", "LocalizerOptions"]

ENV_APPLICATION_NAME = "JSONLOCALIZER_APPLICATION_NAME"
ENV_RESOURCES_PATH = "JSONLOCALIZER_RESOURCES_PATH"
ENV_CONTENT_ROOT = "JSONLOCALIZER_CONTENT_ROOT"


@dataclass(frozen=True, slots=True)
class LocalizerOptions:
    """Immutable configuration for JsonStringLocalizerFactory.

    Attributes:
        application_name: Application name; prefix of every resource base name.
        resources_path: Resources directory relative to the content root
            (e.g., "Resources" or "Resources/Shared"). May be empty.
        content_root: Directory resource locations are resolved against.
            None (default) means the current working directory at the time
            a localizer is created.

    Example:
        >>> options = LocalizerOptions("MyApp", resources_path="Resources/Shared")
        >>> options.relative_path_prefix
        'Resources.Shared.'
    """

    application_name: str
    resources_path: str = ""
    content_root: str | Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If application_name or resources_path is not a str
            ValueError: If application_name is empty
        """
        if not isinstance(self.application_name, str):
            msg = f"application_name must be a str, got {type(self.application_name).__name__}"
            raise TypeError(msg)
        if not self.application_name:
            msg = "application_name must not be empty"
            raise ValueError(msg)
        if self.resources_path is None:
            object.__setattr__(self, "resources_path", "")
        elif not isinstance(self.resources_path, str):
            msg = f"resources_path must be a str, got {type(self.resources_path).__name__}"
            raise TypeError(msg)

    @property
    def relative_path_prefix(self) -> str:
        """Resources path in base-name form.

        Both "/" and "\\" become the join character and a trailing join
        character is appended: "Resources/Shared" -> "Resources.Shared.".
        Empty when no resources path is configured.
        """
        if not self.resources_path:
            return ""
        normalized = self.resources_path.replace("/", PATH_JOIN_CHAR).replace("\\", PATH_JOIN_CHAR)
        return normalized + PATH_JOIN_CHAR

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> LocalizerOptions:
        """Build options from environment variables.

        Reads JSONLOCALIZER_APPLICATION_NAME (required),
        JSONLOCALIZER_RESOURCES_PATH and JSONLOCALIZER_CONTENT_ROOT.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If the application name variable is missing or empty
        """
        env = os.environ if environ is None else environ
        application_name = env.get(ENV_APPLICATION_NAME, "")
        if not application_name:
            msg = f"Environment variable {ENV_APPLICATION_NAME} must be set"
            raise ValueError(msg)
        return cls(
            application_name=application_name,
            resources_path=env.get(ENV_RESOURCES_PATH, ""),
            content_root=env.get(ENV_CONTENT_ROOT) or None,
        )
