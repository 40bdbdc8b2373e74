"""Get htmllinks home directory path or path under it."""

import os
from pathlib import Path

HOME_DIR_NAME = ".htmllinks"


def get_home_dir(*parts: str) -> Path:
    """Get htmllinks home directory path or path under it.

    Checks HTMLLINKS_HOME environment variable first, defaults to ~/.htmllinks if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.htmllinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.htmllinks/config.json")
    """
    home_env = os.environ.get("HTMLLINKS_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / HOME_DIR_NAME
    return home / Path(*parts) if parts else home
