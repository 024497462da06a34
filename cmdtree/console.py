# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for cmdtree applications."""
from rich.console import Console

from cmdtree.themes import get_nord_theme

console = Console(theme=get_nord_theme(), highlight=False)
error_console = Console(stderr=True, highlight=False)
