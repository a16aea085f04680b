"""Command-line interface for tabledef."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from tabledef.config import STATEMENTS, Config
from tabledef.exceptions import ConfigError, TabledefError
from tabledef.schema.builder import TableDefinition
from tabledef.schema.loader import load_tables

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="tabledef",
        description="Generate CREATE/ALTER TABLE statements from table definitions",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--profile", help="Profile in ~/.tabledefcfg")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate table definition files"
    )
    validate_parser.add_argument("--schema-path", type=Path)

    for name, help_text in (
        ("create", "Generate CREATE TABLE statements"),
        ("alter", "Generate ALTER TABLE ... ADD COLUMN statements"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--schema-path", type=Path)
        sub.add_argument(
            "--output", type=Path, help="Output file path (default: stdout)"
        )

    render_parser = subparsers.add_parser(
        "render", help="Generate the configured statement kind"
    )
    render_parser.add_argument("--schema-path", type=Path)
    render_parser.add_argument("--statement", choices=STATEMENTS)
    render_parser.add_argument(
        "--output", type=Path, help="Output file path (default: stdout)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    if args.command == "validate":
        return cmd_validate(args)
    elif args.command in STATEMENTS:
        args.statement = args.command
        return cmd_render(args)
    else:
        return cmd_render(args)


def _resolve_config(args: argparse.Namespace) -> Config:
    def optional_str(value):
        return str(value) if value is not None else None

    config = Config.from_env(
        schema_path=optional_str(getattr(args, "schema_path", None)),
        statement=getattr(args, "statement", None),
        output=optional_str(getattr(args, "output", None)),
        profile=getattr(args, "profile", None),
    )
    config.validate()
    return config


def render_statements(tables: dict[str, TableDefinition], statement: str) -> str:
    """Render one statement per table, each terminated with a semicolon."""
    rendered = []
    for table in tables.values():
        if statement == "alter":
            rendered.append(table.generate_alter() + ";")
        else:
            rendered.append(table.generate_create() + ";")
    return "\n\n".join(rendered)


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate table definition files."""
    try:
        config = _resolve_config(args)
        tables = load_tables(Path(config.schema_path))
        print(f"Validated {len(tables)} tables:")
        for name in sorted(tables):
            print(f"  - {name} ({len(tables[name].columns)} columns)")
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except TabledefError as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return 1


def cmd_render(args: argparse.Namespace) -> int:
    """Generate CREATE or ALTER statements for every loaded table."""
    try:
        config = _resolve_config(args)
        tables = load_tables(Path(config.schema_path))

        if not tables:
            print("No tables found")
            return 0

        sql = render_statements(tables, config.statement)
        if config.output:
            Path(config.output).write_text(sql + "\n")
            logger.info(
                f"Wrote {len(tables)} {config.statement} statement(s) to {config.output}"
            )
        else:
            print(sql)
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except TabledefError as e:
        print(f"Generation error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
