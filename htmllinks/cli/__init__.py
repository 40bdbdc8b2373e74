"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from ..get_package_version import get_package_version

        print(f"htmllinks {get_package_version()}")
        return 0

    app = _create_app()
    try:
        # Standalone mode reports usage errors itself and exits with status 2
        app(argv, prog_name="htmllinks")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
