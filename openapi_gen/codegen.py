"""Render templates and write generated output.

Takes the context from context_builder and produces the C# model source,
written to a file or to stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import jinja2

from .config import GeneratorConfig
from .context_builder import build_context
from .exceptions import OutputError, TemplateError
from .naming import (
    convert_ref_to_class_name,
    snake_case_to_pascal_case,
    strip_newlines,
    title,
    uppercase,
)
from .schema_parser import Schema, load_schema

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_FILTERS = {
    "cleanRef": convert_ref_to_class_name,
    "snakeCaseToPascalCase": snake_case_to_pascal_case,
    "stripNewlines": strip_newlines,
    "title": title,
    "uppercase": uppercase,
}


def make_environment(template_dir: Path = TEMPLATE_DIR) -> jinja2.Environment:
    """Create the Jinja2 environment with the naming filters registered."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters.update(TEMPLATE_FILTERS)
    return env


def render(
    context: dict[str, Any],
    template_name: str = "models.cs.j2",
    env: jinja2.Environment | None = None,
) -> str:
    """Render the model template with the given context."""
    env = env or make_environment()
    try:
        template = env.get_template(template_name)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateError(f"Template parse error: {exc}") from exc
    except jinja2.TemplateNotFound as exc:
        raise TemplateError(f"Template not found: {exc}") from exc
    return template.render(**context)


def render_client(schema: Schema, config: GeneratorConfig) -> str:
    """Render a low level API client from ``schema.paths``.

    Request dispatch by path and method is not generated; operations are
    decoded into the Schema so this can be built on later.
    """
    raise NotImplementedError("API client generation is not supported yet")


def write_output(text: str, path: Path | None = None) -> None:
    """Write ``text`` to ``path``, or to stdout when no path is given."""
    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
    except OSError as exc:
        raise OutputError(f"Unable to create file: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(text), path)


def generate(config: GeneratorConfig) -> str:
    """Run the whole pipeline: load, build context, render, write."""
    schema = load_schema(config.input_path)
    context = build_context(schema, config)
    output = render(context, config.template_name)

    write_output(output, config.output_path)

    if config.output_path is not None:
        print(f"Generated {config.output_path} ({context['model_count']} models)")
    return output
