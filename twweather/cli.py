import asyncio
import inspect
import logging
from importlib import import_module
from pathlib import Path

import click
import structlog
import uvicorn
from dotenv import load_dotenv

from .server import create_app
from .settings import Settings

logger = structlog.get_logger()


class AsyncAwareContext(click.Context):
    """
    A click context that invokes async functions with asyncio.run.
    """

    def invoke(self, *args, **kwargs):
        r = super().invoke(*args, **kwargs)
        if inspect.isawaitable(r):
            return asyncio.run(r)
        else:
            return r


click.Command.context_class = AsyncAwareContext


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    load_dotenv()
    settings = Settings.from_env()

    level = logging.getLevelNamesMapping().get(
        settings.log_level.upper(), logging.INFO
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    ctx.obj = settings


@cli.command(help="Run the HTTP server")
@click.option("--host", help="Interface to listen on")
@click.option("--port", type=int, help="Port to listen on")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None) -> None:
    settings = settings.model_copy(
        update={"host": host or settings.host, "port": port or settings.port}
    )

    logger.info(
        "Starting server",
        environment=settings.environment,
        host=settings.host,
        port=settings.port,
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def load_apps(path: Path) -> None:
    for cli_module in path.glob("*/cli*.py"):

        # Construct the name of the module
        relative_path = cli_module.relative_to(Path(__file__).parent)
        module_path = ".".join(p.name for p in reversed(relative_path.parents))
        module_name = f"{module_path}.{cli_module.stem}"

        # Register the module
        module = import_module(module_name, package="twweather")
        if command := getattr(module, "cli", None):
            cli.add_command(command)


load_apps(Path(__file__).parent)
