"""Create the main Typer CLI app."""

import typer

from pagelinker.api.config.PageLinkerConfig import PageLinkerConfig
from pagelinker.cli.config import config
from pagelinker.cli.link import link
from pagelinker.cli.page import page
from pagelinker.utils.logger import configure_logging


def _configure_logging() -> None:
    """Set up the log file, at the configured level when a config is present."""
    try:
        level = PageLinkerConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(PageLinkerConfig.get_home_dir(), level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="pagelinker CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(link(), name="link")
    app.add_typer(page(), name="page")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        _configure_logging()

    return app
