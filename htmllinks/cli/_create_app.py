"""Create the main Typer CLI app."""

import typer

from ..config.HtmlLinksConfig import HtmlLinksConfig
from ..links.cmd_resolve import cmd_resolve
from ..links.cmd_scan import cmd_scan
from ..utils.logger import configure_logging
from ._handle_stage_result import _display_format, _handle_stage_result


def _configure_logging() -> None:
    try:
        level = HtmlLinksConfig.load().log.level
    except ValueError:
        # Commands report the configuration error themselves
        level = "INFO"
    configure_logging(HtmlLinksConfig.get_config_path().parent, level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Find and resolve hyperlinks in HTML documents",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)
        ctx.obj = {"display_format": display}
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()
        _configure_logging()

    @app.command(name="scan")
    def scan_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="HTML file to scan"),
        base: str | None = typer.Option(None, "--base", "-b", help="Base URI (defaults to the file's URI)"),
    ) -> None:
        """List the links of an HTML file with their ranges and targets."""
        _handle_stage_result(cmd_scan, _display_format(ctx))(path=path, base=base)

    @app.command(name="resolve")
    def resolve_cmd(
        ctx: typer.Context,
        reference: str = typer.Argument(..., help="Link reference as written in an href/src attribute"),
        base: str = typer.Option(..., "--base", "-b", help="URI of the referencing document"),
    ) -> None:
        """Resolve one link reference against a base URI."""
        _handle_stage_result(cmd_resolve, _display_format(ctx))(reference=reference, base=base)

    return app
