"""Link Typer app factory."""

import typer

from pagelinker.api.link.cmd_list import cmd_list
from pagelinker.cli._handle_stage_result import handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Link list operations",
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

    @app.command(name="list")
    def list_cmd(
        ctx: typer.Context,
        page: str = typer.Argument(..., help="Page file to list the links of"),
        sort_by: str = typer.Option("", "--sort-by", "-s", help="Page field to order links by"),
        reverse: bool = typer.Option(False, "--reverse", "-r", help="Reverse the order"),
        depth: int = typer.Option(0, "--depth", min=0, help="Sub-directory levels to list"),
    ) -> None:
        """List the pages and sub-directories next to a page."""
        handle_stage_result(cmd_list, ctx)(page, sort_by=sort_by, reverse=reverse, depth=depth)

    return app
