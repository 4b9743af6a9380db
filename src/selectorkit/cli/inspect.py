"""CLI command: selectorkit inspect -- display the selector tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.document import loads
from selectorkit.errors import SelectorError
from selectorkit.model.selector import ComplexSelector, CompoundSelector, Selector


def _describe(selector: Selector, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(selector, ComplexSelector):
        lines = [f'{indent}combine "{selector.token}"']
        lines.extend(_describe(selector.left, depth + 1))
        lines.extend(_describe(selector.right, depth + 1))
        return lines
    if isinstance(selector, CompoundSelector):
        return [f"{indent}{selector.stringify() or '(empty)'}  rank={selector.rank}"]
    return [f"{indent}{type(selector).__name__}"]


@click.command()
@click.argument("docfile", type=click.Path(exists=True))
@click.pass_obj
def inspect(config: SelectorKitConfig, docfile: str) -> None:
    """Load a selector document and display its tree structure.

    Complex nodes show their combinator; compound nodes show their CSS text
    and the rank of their last part.
    """
    try:
        source = Path(docfile).read_text(encoding="utf-8")
        selector = loads(source, max_depth=config.max_depth)
    except (SelectorError, UnicodeDecodeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Selector: {selector.stringify()}")
    click.echo()
    for line in _describe(selector):
        click.echo(line)
