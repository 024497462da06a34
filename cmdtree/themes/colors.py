# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich `Theme` used by cmdtree help output.

`NordColors` backs the named styles of the theme returned by
`get_nord_theme()`, so renderers use names like `[command]` or `[option]`
instead of colors.
"""
from rich.theme import Theme


class NordColors:
    """Nord palette."""

    NORD4 = "#D8DEE9"
    NORD6 = "#ECEFF4"
    NORD8 = "#88C0D0"
    NORD9 = "#81A1C1"
    NORD14 = "#A3BE8C"


def get_nord_theme() -> Theme:
    """Return the rich theme with cmdtree's semantic style names."""
    return Theme(
        {
            "usage": f"bold {NordColors.NORD6}",
            "command": f"bold {NordColors.NORD8}",
            "option": NordColors.NORD9,
            "description": NordColors.NORD4,
            "section": f"bold {NordColors.NORD14}",
        }
    )
