"""
Cmdtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Any

from cmdtree.config import loader
from cmdtree.console import error_console
from cmdtree.exceptions import ConfigError
from cmdtree.runner import run
from cmdtree.utils import setup_logging


def find_cmdtree_config() -> Path | None:
    candidates = [
        Path.cwd() / "cmdtree.yaml",
        Path.cwd() / "cmdtree.toml",
        Path.cwd() / ".cmdtree.yaml",
        Path.cwd() / ".cmdtree.toml",
        Path(os.environ.get("CMDTREE_CONFIG", "cmdtree.yaml")),
        Path.home() / ".config" / "cmdtree" / "cmdtree.yaml",
        Path.home() / ".config" / "cmdtree" / "cmdtree.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_cmdtree_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: list[str] | None = None) -> Any:
    setup_logging()
    config_path = bootstrap()
    if not config_path:
        error_console.print("ERROR: no command tree file found")
        sys.exit(1)
    try:
        root = loader(config_path)
    except ConfigError as error:
        error_console.print(f"ERROR: {error}", markup=False, soft_wrap=True)
        sys.exit(1)
    return run(root, sys.argv if argv is None else argv)


if __name__ == "__main__":
    main()
