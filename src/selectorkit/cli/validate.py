"""CLI command: selectorkit validate -- check a selector document."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.validation import validate as run_validate


@click.command()
@click.argument("docfile", type=click.Path(exists=True))
@click.pass_obj
def validate(config: SelectorKitConfig, docfile: str) -> None:
    """Check a JSON selector document for ordering, uniqueness and shape errors.

    Prints every diagnostic and exits with code 0 if the document is valid,
    or code 1 otherwise.
    """
    doc_path = Path(docfile)

    try:
        data = json.loads(doc_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc.msg}", err=True)
        sys.exit(1)
    except UnicodeDecodeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(data, max_depth=config.max_depth)

    if not diagnostics:
        click.echo(f"OK: {doc_path.name} is valid")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))
    click.echo()
    click.echo(f"Summary: {len(diagnostics)} error(s)")
    sys.exit(1)
