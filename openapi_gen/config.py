"""Generator settings, built from command line arguments."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

DEFAULT_NAMESPACE = "Nakama"
DEFAULT_JSON_ATTRIBUTE = "TinyJson.JsonProperty"
DEFAULT_TEMPLATE = "models.cs.j2"


@dataclass
class GeneratorConfig:
    """Settings for one generator run.

    ``output_path`` of None writes the generated code to stdout.
    """

    input_path: Path
    output_path: Path | None = None
    namespace: str = DEFAULT_NAMESPACE
    json_attribute: str = DEFAULT_JSON_ATTRIBUTE
    template_name: str = DEFAULT_TEMPLATE


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Build a config from parsed arguments. Only the first input is used."""
    return GeneratorConfig(
        input_path=Path(args.inputs[0]),
        output_path=Path(args.output) if args.output else None,
        namespace=args.namespace,
        json_attribute=args.json_attribute,
    )
