from __future__ import annotations

import logging
from pathlib import Path

import typer

from ageprune.common.config import load_config
from ageprune.common.errors import PruneError
from ageprune.common.log import setup_logging
from ageprune.prune.pipeline import run

CLI_NAME = "ageprune"

app = typer.Typer(name=CLI_NAME, help="Delete directory entries older than a given age.", add_completion=False)


@app.command()
def prune(
    path: Path = typer.Option(..., "--path", "-p", help="Directory whose immediate entries are candidates."),
    duration: str = typer.Option(..., "--duration", "-d", help="Age threshold, e.g. 30d or 2w."),
    config: Path | None = typer.Option(None, "--config", "-c", help="Optional YAML file with logging settings."),
) -> None:
    cfg = load_config(config)
    setup_logging(cfg.logging, name=CLI_NAME)
    log = logging.getLogger("ageprune.cli")

    try:
        removed = run(path, duration)
    except PruneError as e:
        log.debug("run failed: %s", type(e).__name__)
        typer.echo(str(e), err=True)
        raise typer.Exit(code=e.exit_code) from e

    typer.echo(f"Successfully removed {removed} files!")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
