"""Page Typer app factory."""

import typer

from pagelinker.api.render.cmd_render import cmd_render
from pagelinker.cli._handle_stage_result import handle_stage_result


def page() -> typer.Typer:
    """Create and configure the page Typer app."""
    app = typer.Typer(
        name="page",
        help="Page operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="render")
    def render_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Page file to render"),
    ) -> None:
        """Render a page with its link list."""
        handle_stage_result(cmd_render, ctx)(path)

    return app
