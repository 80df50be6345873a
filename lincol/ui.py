"""Rich console shared by the CLI commands.

Usage:
    from lincol.ui import console
    console.print("[path]config.yml[/path]")
"""

import sys

from rich.console import Console
from rich.theme import Theme

LINCOL_THEME = Theme({
    "error": "bold red",
    "path": "bold cyan",
    "pointer": "cyan",
    "dim": "dim white",
})

# Single console instances - import these, don't create your own
console = Console(
    theme=LINCOL_THEME,
    force_terminal=sys.stdout.isatty()
)

err_console = Console(
    theme=LINCOL_THEME,
    stderr=True,
    force_terminal=sys.stderr.isatty()
)
