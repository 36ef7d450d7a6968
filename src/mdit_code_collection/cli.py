"""Render Markdown files with grouped code blocks to HTML."""

import logging
from collections.abc import Iterable
from pathlib import Path

import click
from beartype import beartype

from mdit_code_collection.options import CodeCollectionOptions
from mdit_code_collection.plugin import FLAVORS, create_md_parser

logger = logging.getLogger(__name__)


@beartype
@click.command()
@click.option(
    "flavor",
    "--flavor",
    type=click.Choice(choices=FLAVORS),
    default="commonmark",
    show_default=True,
    help="The Markdown syntax to parse.",
)
@click.option(
    "output_dir",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write <stem>.html files here instead of to stdout.",
)
@click.option("active_tab_class", "--active-tab-class", default="tab-active")
@click.option("active_code_class", "--active-code-class", default="code-active")
@click.option("copy_button_tag", "--copy-button-tag", default="i")
@click.option(
    "copy_button_icon_classes",
    "--copy-button-icon-classes",
    default="fa-solid fa-copy",
)
@click.option(
    "copy_button_container_class",
    "--copy-button-container-class",
    default="code-block-copy",
)
@click.option("copy_function", "--copy-function", default="copyCode")
@click.option(
    "copy_button",
    "--copy-button/--no-copy-button",
    default=True,
    show_default=True,
)
@click.option("verbose", "--verbose", is_flag=True, default=False)
@click.argument(
    "file_paths",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    nargs=-1,
)
def main(
    *,
    flavor: str,
    output_dir: Path | None,
    active_tab_class: str,
    active_code_class: str,
    copy_button_tag: str,
    copy_button_icon_classes: str,
    copy_button_container_class: str,
    copy_function: str,
    copy_button: bool,
    verbose: bool,
    file_paths: Iterable[Path],
) -> None:
    """Render Markdown files with grouped code blocks to HTML."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    options = CodeCollectionOptions(
        active_tab_class=active_tab_class,
        active_code_class=active_code_class,
        copy_button_tag=copy_button_tag,
        copy_button_icon_classes=copy_button_icon_classes,
        copy_button_container_class=copy_button_container_class,
        copy_button=copy_button,
        copy_function=copy_function,
    )
    md = create_md_parser(options=options, flavor=flavor)

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    for file_path in file_paths:
        html = md.render(file_path.read_text(encoding="utf-8"))
        if output_dir is None:
            click.echo(message=html, nl=False)
            continue

        output_path = output_dir / f"{file_path.stem}.html"
        output_path.write_text(data=html, encoding="utf-8")
        logger.debug("Wrote %s", output_path)
