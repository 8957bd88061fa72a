"""Jinja filters for echoing already-sanitized form values."""

from __future__ import annotations
import re

from markupsafe import Markup

from contactform.utils.validators import escape_once

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def _escaped(value) -> str:
    # sanitized values are escaped again without double-encoding entities
    return escape_once("" if value is None else str(value))


def safe_text(value) -> Markup:
    return Markup(_escaped(value))


def nl2br(value) -> Markup:
    return Markup(_NEWLINE_RE.sub(lambda m: "<br>" + m.group(0), _escaped(value)))


def register_filters(env) -> None:
    env.filters["safe_text"] = safe_text
    env.filters["nl2br"] = nl2br
