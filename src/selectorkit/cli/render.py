"""CLI command: selectorkit render -- print the CSS text of a selector document."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.document import loads
from selectorkit.errors import SelectorError


@click.command()
@click.argument("docfile", type=click.Path(exists=True))
@click.pass_obj
def render(config: SelectorKitConfig, docfile: str) -> None:
    """Load a JSON selector document and print the selector it describes."""
    try:
        source = Path(docfile).read_text(encoding="utf-8")
        selector = loads(source, max_depth=config.max_depth)
    except (SelectorError, UnicodeDecodeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
