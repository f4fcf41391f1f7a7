"""CLI - main entry point."""

import sys
from importlib.metadata import PackageNotFoundError, version


def _configure_logging() -> None:
    from autolink.api.config.AutolinkConfig import AutolinkConfig
    from autolink.utils.logger import configure_logging

    try:
        level = AutolinkConfig.load_or_default().log.level
    except ValueError:
        level = "INFO"
    configure_logging(AutolinkConfig.get_home_dir(), level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from autolink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        try:
            print(f"autolink {version('autolink')}")
        except PackageNotFoundError:
            print("autolink unknown")
        return 0

    _configure_logging()
    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
