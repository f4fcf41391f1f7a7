"""Link Typer app factory."""

import typer

from autolink.api.link.cmd_apply import cmd_apply
from autolink.api.link.cmd_registry import cmd_registry

from ._get_display_format import _get_display_format
from ._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Insert wikilinks for known pages",
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

    @app.command(name="apply")
    def apply_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown file or directory to link"),
        vault: str | None = typer.Option(None, "--vault", help="Vault directory holding the known pages"),
        registry: str | None = typer.Option(None, "--registry", help="JSON file with page descriptors"),
        write: bool = typer.Option(False, "--write", "-w", help="Write linked text back to the files"),
    ) -> None:
        """Link bare mentions of known pages."""
        _handle_stage_result(cmd_apply, _get_display_format(ctx))(
            path=path, vault=vault, registry=registry, write=write
        )

    @app.command(name="registry")
    def registry_cmd(
        ctx: typer.Context,
        vault: str | None = typer.Option(None, "--vault", help="Vault directory holding the known pages"),
        registry: str | None = typer.Option(None, "--registry", help="JSON file with page descriptors"),
    ) -> None:
        """Show the keys, rejections and shared shorthands of the registry."""
        _handle_stage_result(cmd_registry, _get_display_format(ctx))(vault=vault, registry=registry)

    return app
