"""Generate a typed accessor module from the `default` catalogs.

The emitted module defines a LanguageLocalizer subclass with one method
per message, each parameter typed with its own TypeVar so type checkers
see the exact arguments every message needs.

Usage:
    python -m localization.i18n.codegen --output app/generated/localizer.py
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from localization.i18n.accessors import TYPE_PARAMETER_ALPHABET, Accessor
from localization.i18n.bindings import CompiledLocalizations, compile_localizations
from localization.i18n.errors import LocalizationError
from localization.logging import get_module_logger

logger = get_module_logger()


def _literal(value: str) -> str:
    return json.dumps(value)


def _tuple_lines(name: str, values: Sequence[str]) -> List[str]:
    if not values:
        return [f"    {name} = ()"]
    return [f"    {name} = ("] + [f"        {_literal(value)}," for value in values] + ["    )"]


def _method_lines(accessor: Accessor) -> List[str]:
    if not accessor.parameters:
        return [
            f"    def {accessor.method_name}(self) -> str:",
            f"        return self.localize({_literal(accessor.entry)})",
        ]

    params = ", ".join(
        f"{parameter.name}: {parameter.type_parameter}" for parameter in accessor.parameters
    )
    arguments = ", ".join(
        f"{_literal(parameter.variable)}: {parameter.name}" for parameter in accessor.parameters
    )
    return [
        f"    def {accessor.method_name}(self, {params}) -> str:",
        f"        return self.localize({_literal(accessor.entry)}, {{{arguments}}})",
    ]


def render_module(compiled: CompiledLocalizations, class_name: str = "Localizer") -> str:
    """Render the accessor module source.

    Args:
        compiled: Result of compile_localizations.
        class_name: Name of the generated class.

    Returns:
        Python source text.
    """
    type_parameter_count = max(
        (len(accessor.parameters) for accessor in compiled.accessors), default=0
    )

    lines = [
        '"""Localization accessors generated from the default catalogs.',
        "",
        "Regenerate with `python -m localization.i18n.codegen`, do not edit by hand.",
        '"""',
        "",
    ]
    if type_parameter_count:
        lines.extend(["from typing import TypeVar", ""])
    lines.append("from localization.i18n.localizer import LanguageLocalizer")
    if type_parameter_count:
        lines.append("from localization.i18n.models import FluentArgument")
        lines.append("")
        lines.extend(
            f'{letter} = TypeVar("{letter}", bound=FluentArgument)'
            for letter in TYPE_PARAMETER_ALPHABET[:type_parameter_count]
        )

    lines.extend(
        [
            "",
            "",
            f"class {class_name}(LanguageLocalizer):",
            '    """Typed accessors for every message of the default catalogs."""',
            "",
        ]
    )
    lines.extend(_tuple_lines("EXPECTED_MESSAGES", compiled.expected_messages))
    lines.extend(_tuple_lines("EXPECTED_TERMS", compiled.expected_terms))

    for accessor in compiled.accessors:
        lines.append("")
        lines.extend(_method_lines(accessor))

    return "\n".join(lines) + "\n"


def write_module(
    output_file: Path,
    translations_dir: Optional[Path] = None,
    class_name: str = "Localizer",
) -> Path:
    """Compile the catalogs and write the accessor module.

    Args:
        output_file: Destination of the generated module.
        translations_dir: Catalog root, defaults to the configured one.
        class_name: Name of the generated class.

    Returns:
        The written path.
    """
    compiled = compile_localizations(translations_dir)
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(render_module(compiled, class_name), encoding="utf-8")
    logger.info(
        "accessor_module_written",
        path=str(output_file),
        accessor_count=len(compiled.accessors),
    )
    return output_file


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate typed localization accessors from the default catalogs"
    )
    parser.add_argument("--output", required=True, type=Path, help="Module file to write")
    parser.add_argument(
        "--resources",
        type=Path,
        default=None,
        help="Catalog root (default: TRANSLATION_DIR or ./localizations)",
    )
    parser.add_argument("--class-name", default="Localizer", help="Generated class name")
    args = parser.parse_args(argv)

    try:
        output = write_module(args.output, args.resources, args.class_name)
    except LocalizationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(f"✅ Localization accessors generated: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
