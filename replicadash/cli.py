"""Command line entry point for replicadash."""

from __future__ import annotations

import asyncio
import logging
import subprocess
from pathlib import Path

import typer
from rich.console import Console

from replicadash.constants.enums import OutputFormat, ReplicaSetKind
from replicadash.constants.values import APP_TITLE
from replicadash.controllers.replicasets.controller import ReplicaSetController
from replicadash.models.state.app_settings import ConfigLoadError, load_settings
from replicadash.utils.report_generator import render

app = typer.Typer(name=APP_TITLE, help="Replica set overview for Kubernetes clusters.")
console = Console()

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(name)-12s %(levelname)-8s %(message)s",
    )


@app.command("list", help="List replica sets with their services and pod status.")
def list_replica_sets(
    context: str | None = typer.Option(
        None, "--context", help="Kubernetes context to use."
    ),
    kind: ReplicaSetKind | None = typer.Option(
        None, "--kind", "-k", help="Resource to list as replica sets."
    ),
    output: OutputFormat | None = typer.Option(
        None, "--output", "-o", help="Output format."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a YAML or JSON settings file."
    ),
):
    try:
        settings = load_settings(config)
    except ConfigLoadError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)

    overrides = {}
    if kind is not None:
        overrides["replica_set_kind"] = kind
    if output is not None:
        overrides["output_format"] = output
    settings = settings.model_copy(update=overrides)

    controller = ReplicaSetController(context=context, settings=settings)
    try:
        replica_set_list = asyncio.run(controller.get_replica_set_list())
    except (OSError, RuntimeError, subprocess.TimeoutExpired) as e:
        logger.error("Unable to list replica sets: %s", e)
        raise typer.Exit(code=1)

    rendered = render(replica_set_list, settings.output_format)
    if isinstance(rendered, str):
        typer.echo(rendered)
    else:
        console.print(rendered)


if __name__ == "__main__":
    app()
