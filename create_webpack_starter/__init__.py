"""create-webpack-starter -- scaffold a new webpack starter project.

Asks for a project name and a template, copies the bundled template tree to
``<cwd>/<project name>`` and installs its npm dependencies.

Quick usage::

    from create_webpack_starter import Scaffolder, StarterConfig

    scaffolder = Scaffolder(StarterConfig(skip_install=True), project_name="demo-app")
    exit_code = await scaffolder.run()
"""

from create_webpack_starter.config import StarterConfig
from create_webpack_starter.copier import copy_template
from create_webpack_starter.errors import (
    CopyError,
    DirectoryExistsError,
    InstallError,
    StarterError,
)
from create_webpack_starter.installer import install_deps
from create_webpack_starter.models import ScaffoldRequest, ScaffoldResult
from create_webpack_starter.prompts import ask_questions
from create_webpack_starter.registry import TEMPLATES, TemplateDescriptor, get_template
from create_webpack_starter.scaffold import Scaffolder, main

__version__ = "1.0.0"

__all__ = [
    "CopyError",
    "DirectoryExistsError",
    "InstallError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "Scaffolder",
    "StarterConfig",
    "StarterError",
    "TEMPLATES",
    "TemplateDescriptor",
    "ask_questions",
    "copy_template",
    "get_template",
    "install_deps",
    "main",
]
