"""Separate YAML frontmatter from a Markdown body (UNO: single function)."""

import logging
import re

import yaml

from .Frontmatter import Frontmatter

logger = logging.getLogger(__name__)

_FRONTMATTER = re.compile(r"\A---[ \t]*\r?\n(?P<yaml>.*?)(?:\r?\n)?^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def split_frontmatter(text: str) -> Frontmatter:
    """Return the frontmatter block, its parsed mapping and the remaining body.

    Invalid YAML, or YAML that is not a mapping, yields empty ``data`` but the
    block is still split off unchanged.
    """
    match = _FRONTMATTER.match(text)
    if match is None:
        return Frontmatter(raw="", body=text)

    raw = match.group(0)
    try:
        data = yaml.safe_load(match.group("yaml"))
    except yaml.YAMLError as e:
        logger.warning("Invalid frontmatter YAML: %s", e)
        data = None
    if not isinstance(data, dict):
        data = {}
    return Frontmatter(raw=raw, body=text[len(raw) :], data=data)
