"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Usage errors are reported by Typer and exit with code 2.
    """
    from pagelinker.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from pagelinker.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"pagelinker {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        app(argv, prog_name="pagelinker")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
