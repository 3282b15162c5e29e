import asyncio
import json
from typing import Any, Awaitable, Callable, Optional

import click
from pydantic import BaseModel
from rich.console import Console

from ._config import resolve_config
from ._http import Outcome, RequestBuilder
from ._utils._logs import setup_logging
from .client import GraphNodeClient

console = Console()
err_console = Console(stderr=True)


def _render(data: Any) -> str:
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    if data is None:
        return "(no content)"
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2)


def _run(
    ctx: click.Context, call: Callable[[GraphNodeClient], Awaitable[Outcome[Any]]]
) -> None:
    async def _main() -> Outcome[Any]:
        async with GraphNodeClient(**ctx.obj) as client:
            return await call(client)

    outcome = asyncio.run(_main())
    if not outcome.ok:
        err_console.print(outcome.error.message, style="red", markup=False, soft_wrap=True)
        if outcome.error.body is not None:
            err_console.print(_render(outcome.error.body), markup=False, soft_wrap=True)
        raise click.exceptions.Exit(1)
    console.print(_render(outcome.data), markup=False, soft_wrap=True)


@click.group()
@click.option("--base-url", envvar="GRAPHNODE_BASE_URL", help="API origin.")
@click.option("--token", envvar="GRAPHNODE_ACCESS_TOKEN", help="Bearer access token.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context, base_url: Optional[str], token: Optional[str], verbose: bool
) -> None:
    """GraphNode API command line."""
    setup_logging(should_debug=verbose)
    ctx.obj = {"base_url": base_url, "access_token": token}


@cli.command()
@click.pass_context
def health(ctx: click.Context) -> None:
    """Check that the API is up."""
    _run(ctx, lambda client: client.health.get())


@cli.command()
@click.pass_context
def me(ctx: click.Context) -> None:
    """Show the signed-in user."""
    _run(ctx, lambda client: client.me.get())


@cli.command()
@click.argument("path")
@click.option("--query", "-q", multiple=True, help="Query parameter as key=value.")
@click.pass_context
def url(ctx: click.Context, path: str, query: tuple[str, ...]) -> None:
    """Print the absolute URL of PATH without sending a request."""
    params = {}
    for item in query:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got '{item}'", param_hint="--query")
        params[key] = value

    config = resolve_config(**ctx.obj)
    rendered = RequestBuilder(config.base_url).path(path).query(params).url()
    console.print(rendered, markup=False, soft_wrap=True)
