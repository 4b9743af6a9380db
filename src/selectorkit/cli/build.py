"""CLI command: selectorkit build -- assemble a compound selector from options."""

from __future__ import annotations

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.document import dumps
from selectorkit.model.part import PartKind
from selectorkit.model.selector import CompoundSelector


@click.command()
@click.option("--element", default=None, help="Element (type) name")
@click.option("--id", "id_", default=None, help="Id, without the leading #")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute body without brackets (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class body (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element name")
@click.option("--json", "as_json", is_flag=True, help="Print a selector document instead of CSS")
@click.pass_obj
def build(
    config: SelectorKitConfig,
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
    as_json: bool,
) -> None:
    """Build one compound selector; parts are applied in CSS order."""
    selector = CompoundSelector()
    if element:
        selector.add(PartKind.ELEMENT, element)
    if id_:
        selector.add(PartKind.ID, id_)
    for value in classes:
        selector.add(PartKind.CLASS, value)
    for value in attrs:
        selector.add(PartKind.ATTR, value)
    for value in pseudo_classes:
        selector.add(PartKind.PSEUDO_CLASS, value)
    if pseudo_element:
        selector.add(PartKind.PSEUDO_ELEMENT, pseudo_element)

    if as_json:
        click.echo(dumps(selector, indent=config.json_indent))
    else:
        click.echo(selector.stringify())
