"""Command line entry point for the student service.

Usage:
    python main.py                  # serve on 0.0.0.0:8080
    python main.py --port 9000      # serve on another port
    python main.py --seed           # seed a store with sample students, then exit
"""

from __future__ import annotations

import typer
import uvicorn

from app import create_app
from log import logger, setup_logging
from seeder import seed_data
from store import StudentStore

# ===== SERVER CONFIG =====
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

cli = typer.Typer(
    name="student-service",
    help="In-memory student CRUD service",
    add_completion=False,
)


@cli.command()
def run(
    seed: bool = typer.Option(False, "--seed", help="Seed the store with sample data and exit"),
    host: str = typer.Option(DEFAULT_HOST, "--host", help="Interface to bind"),
    port: int = typer.Option(DEFAULT_PORT, "--port", "-p", help="Port to listen on"),
) -> None:
    setup_logging()
    store = StudentStore()

    if seed:
        ids = seed_data(store)
        typer.echo(f"Seeded {len(ids)} students")
        return

    logger.info("Server starting on port %d...", port)
    uvicorn.run(create_app(store), host=host, port=port)


if __name__ == "__main__":
    cli()
