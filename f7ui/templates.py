"""Inline script/style rendering.

Every inline <script>/<style> body the builders emit lives in a Jinja2
template under f7ui/templates/. Props are passed as template variables.
Values that end up in JavaScript go through the tojson filter, which escapes
<, >, & and ' so user data cannot close the surrounding <script>.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound
from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup

from f7ui.exceptions import TemplateNotFoundError

TEMPLATES_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=None)
def get_env() -> Environment:
    """Get the shared Jinja2 environment."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def to_json(value: Any) -> Markup:
    """Serialize value the way the tojson filter does, for data-* attributes."""
    return htmlsafe_json_dumps(value, **get_env().policies["json.dumps_kwargs"])


def render_template(name: str, **props: Any) -> Markup:
    """Render a template with props.

    Args:
        name: Template file name (e.g., "preloader.js.j2")
        **props: Variables passed to the template

    Returns:
        Rendered text, marked safe for inclusion in a tag

    Raises:
        TemplateNotFoundError: If the template does not exist
    """
    try:
        tmpl = get_env().get_template(name)
    except TemplateNotFound as e:
        raise TemplateNotFoundError(name) from e
    return Markup(tmpl.render(**props))
