"""create-webpack-starter configuration.

Typed settings for the scaffolding CLI.  Values come from the defaults below,
from ``STARTER_*`` environment variables via :meth:`StarterConfig.from_env`,
and finally from command-line flags applied by the entry point.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class StarterConfig(BaseModel):
    """Settings shared by the prompter, installer and orchestrator."""

    default_project_name: str = Field(
        default="my-app",
        min_length=1,
        description="Project name used when the operator submits an empty answer",
    )
    install_command: list[str] = Field(
        default_factory=lambda: ["npm", "install"],
        min_length=1,
        description="Program and arguments run inside the new project directory",
    )
    dev_command: str = Field(
        default="npm run dev",
        description="Command suggested to the operator once scaffolding is done",
    )
    skip_install: bool = Field(
        default=False, description="Copy the template without installing dependencies"
    )

    @property
    def install_command_display(self) -> str:
        """The install command as the operator would type it."""
        return " ".join(self.install_command)

    @classmethod
    def from_env(cls) -> "StarterConfig":
        """Build a ``StarterConfig`` from environment variables.

        Recognised variables (all optional):
            STARTER_DEFAULT_NAME, STARTER_INSTALL_COMMAND (whitespace-split),
            STARTER_DEV_COMMAND, STARTER_SKIP_INSTALL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STARTER_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["STARTER_DEFAULT_NAME"]
        if os.environ.get("STARTER_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["STARTER_INSTALL_COMMAND"].split()
        if os.environ.get("STARTER_DEV_COMMAND"):
            kwargs["dev_command"] = os.environ["STARTER_DEV_COMMAND"]
        if os.environ.get("STARTER_SKIP_INSTALL"):
            kwargs["skip_install"] = (
                os.environ["STARTER_SKIP_INSTALL"].strip().lower() in _TRUTHY
            )
        return cls(**kwargs)
