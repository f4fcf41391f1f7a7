"""Display format chosen on the root command (UNO: single function)."""

import typer


def _get_display_format(ctx: typer.Context) -> str:
    """``--display`` value stored by the root callback, ``yaml`` when absent."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
        return obj["display_format"]
    return "yaml"
