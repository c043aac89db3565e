"""Template preview rendering.

Renders a mapping's template in memory. Writing the result under the build
root belongs to the downstream renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from jinja2 import ChainableUndefined, Environment, FileSystemLoader, Template

from ..core.models import OutputMapping

logger = logging.getLogger(__name__)


def load_template(template_path: Path) -> Template:
    """Load a Jinja2 template from a file path.

    Args:
        template_path: Path to the template file

    Returns:
        Compiled Jinja2 template
    """
    if not template_path.exists():
        raise FileNotFoundError(f"Template not found: {template_path}")

    # Use template's parent directory as loader search path
    loader = FileSystemLoader(str(template_path.parent))
    env = Environment(
        loader=loader,
        undefined=ChainableUndefined,
        autoescape=True,
        trim_blocks=True,
        keep_trailing_newline=True,
    )

    return env.get_template(template_path.name)


def render_mapping(mapping: OutputMapping) -> str:
    """Render a mapping's template with its context.

    Non-mapping contexts are exposed to the template as ``context``.

    Args:
        mapping: Output mapping to preview

    Returns:
        Rendered text
    """
    logger.debug(f"Rendering template: {mapping.template_source}")

    template = load_template(mapping.template_source)
    if isinstance(mapping.context, Mapping):
        rendered_text = template.render(**mapping.context)
    else:
        rendered_text = template.render(context=mapping.context)

    logger.info(f"Rendered {mapping.template_source} for {mapping.destination_path}")
    return rendered_text
