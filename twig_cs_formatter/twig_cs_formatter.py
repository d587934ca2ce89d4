import json
import logging
import sys
from pathlib import Path

import click

from .atomic_writer import AtomicWriter
from .pipeline import PipelineConfig, TwigFormatterError, TwigFormattingPipeline
from .provider import TextDocument, TwigDocumentFormattingProvider, apply_edits, format_document_command

logger = logging.getLogger(__name__)


def _show_error(message: str) -> None:
    click.echo(message, err=True)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--workspace",
    "-w",
    default=None,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Project root used to resolve the prettier configuration",
)
@click.option("--check", is_flag=True, default=False, help="Report files that would change without writing them")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def twig_cs_formatter(config, workspace, check, verbose, paths):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = PipelineConfig.from_dict(json.load(f))
    else:
        config = PipelineConfig()

    pipeline = TwigFormattingPipeline(config)
    if not pipeline.formatter.is_available():
        logger.warning("prettier could not be started with: %s", " ".join(config.formatter.command))

    provider = TwigDocumentFormattingProvider(pipeline, show_error_message=_show_error)
    writer = AtomicWriter()

    failed = False
    changed = []
    for path in paths:
        document = TextDocument.from_path(path, workspace)
        edits = format_document_command(document, provider)
        if edits is None:
            logger.warning("Skipping %s: not a Twig template", path)
            continue
        if not edits:
            failed = True
            continue

        formatted = apply_edits(document, edits)
        if formatted == document.text:
            continue
        if not check:
            try:
                writer.write(Path(path), formatted)
            except (TwigFormatterError, OSError) as e:
                logger.exception("Writing failed: %s", path)
                _show_error(f"Error writing {path}: {e}")
                failed = True
                continue
        changed.append(path)

    if check:
        for path in changed:
            click.echo(f"Would reformat {path}")
    else:
        click.echo(f"Formatted {len(changed)} file(s).")

    if failed or (check and changed):
        sys.exit(1)
