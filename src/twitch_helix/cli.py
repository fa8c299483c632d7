# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.


"""Command line entry point: ``twitch-helix``."""

from __future__ import annotations

import asyncio
import dataclasses
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import click
import msgspec
from dotenv import load_dotenv

from .api.channels import ChannelInfoRequest
from .api.games import GameById, GameByName, GameRequest
from .api.oauth import ValidateRequest
from .api.search import SearchChannelsRequest
from .client import Client
from .config import ClientConfig
from .exceptions import ConfigError, TwitchHelixError
from .logging import setup_logging
from .response import ResponseData, ResponseError


def _client_options(func):
    func = click.option(
        "--client-id",
        default=None,
        help="Client id for Helix requests (default: $TWITCH_HELIX_CLIENT_ID)",
    )(func)
    func = click.option(
        "--token",
        default=None,
        help="OAuth token (default: $TWITCH_HELIX_OAUTH_TOKEN)",
    )(func)
    return func


def _echo_json(value: Any) -> None:
    click.echo(msgspec.json.format(msgspec.json.encode(value), indent=2).decode())


def _dispatch(
    token: str | None,
    client_id: str | None,
    send: Callable[[Client], Awaitable[ResponseData[Any] | ResponseError]],
) -> ResponseData[Any]:
    """Send one request, exiting with status 1 on any failure."""
    config: ClientConfig = click.get_current_context().find_object(ClientConfig)
    if token:
        config = dataclasses.replace(config, oauth_token=token)
    if client_id:
        config = dataclasses.replace(config, client_id=client_id)

    async def run():
        async with config.create_client() as client:
            return await send(client)

    try:
        response = asyncio.run(run())
    except TwitchHelixError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if isinstance(response, ResponseError):
        click.echo(f"API error: {response}", err=True)
        sys.exit(1)
    return response


@click.group()
@click.version_option(package_name="twitch-helix")
@click.option(
    "--log-level",
    default=None,
    help="Log level (default: $TWITCH_HELIX_LOG_LEVEL or INFO)",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Log output format",
)
@click.pass_context
def main(ctx: click.Context, log_level: str | None, log_format: str):
    """Query the Twitch Helix API."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    try:
        config = ClientConfig.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if log_level:
        config.log_level = log_level.upper()
    setup_logging(config.log_config(format=log_format))
    ctx.obj = config


@main.command()
@_client_options
def validate(token: str | None, client_id: str | None):
    """Validate the OAuth token and print what it grants."""
    request = ValidateRequest()
    response = _dispatch(token, client_id, lambda c: c.request_oauth(request))
    _echo_json(response.data)


@main.command()
@click.argument("broadcaster_id")
@_client_options
def channel(broadcaster_id: str, token: str | None, client_id: str | None):
    """Print information about the channel of BROADCASTER_ID."""
    request = ChannelInfoRequest(broadcaster_id)
    response = _dispatch(token, client_id, lambda c: c.request_helix(request))

    found = request.channel(response.data)
    if found is None:
        click.echo(f"No channel found for {broadcaster_id}", err=True)
        sys.exit(1)
    _echo_json(found)


@main.command()
@click.option("--id", "game_id", default=None, help="Look the game up by id")
@click.option("--name", default=None, help="Look the game up by name")
@_client_options
def game(
    game_id: str | None, name: str | None, token: str | None, client_id: str | None
):
    """Print information about a game, by id or by name."""
    if (game_id is None) == (name is None):
        raise click.UsageError("Pass exactly one of --id or --name")
    if game_id == "" or name == "":
        raise click.UsageError("--id and --name must not be empty")

    request: GameRequest
    if game_id is not None:
        request = GameById(game_id)
    else:
        request = GameByName(name)
    response = _dispatch(token, client_id, lambda c: c.request_helix(request))

    found = request.game(response.data)
    if found is None:
        click.echo(f"No game found for {game_id or name}", err=True)
        sys.exit(1)
    _echo_json(found)


@main.command()
@click.argument("query")
@click.option("--first", type=int, default=None, help="Maximum number of results")
@click.option("--after", default=None, help="Cursor of the page to fetch")
@click.option("--live-only", is_flag=True, help="Only return live channels")
@_client_options
def search(
    query: str,
    first: int | None,
    after: str | None,
    live_only: bool,
    token: str | None,
    client_id: str | None,
):
    """Search channels matching QUERY.

    Prints the matching channels and the cursor of the next page, if any.

    Example:
        twitch-helix search speedrun --first 20 --live-only
    """
    request = SearchChannelsRequest(query)
    if first is not None:
        request = request.with_first(first)
    if after:
        request = request.with_after(after)
    if live_only:
        request = request.with_live_only(True)

    response = _dispatch(token, client_id, lambda c: c.request_helix(request))
    _echo_json({"channels": response.data, "cursor": response.cursor()})


if __name__ == "__main__":
    main()
