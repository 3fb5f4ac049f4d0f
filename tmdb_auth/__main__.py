import logging.config as log_config
from typing import Optional

import click
from dotenv import load_dotenv

from tmdb_auth.config.provider import EnvConfigProvider
from tmdb_auth.exceptions import TMDbError
from tmdb_auth.logging_config import get_logging_config
from tmdb_auth.modules.auth import AuthenticationClient, AuthFactory

load_dotenv()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_client(ctx: click.Context) -> AuthenticationClient:
    """Build the client from the environment once a subcommand actually runs."""
    try:
        client = AuthFactory.build(ctx.obj)
    except ValueError as e:
        raise click.ClickException(str(e))

    ctx.call_on_close(client.transport.close)
    return client


@click.group()
@click.option(
    "--log-level",
    "log_level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Overrides TMDB_LOG_LEVEL.",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]):
    """Obtain TMDb request tokens and sessions."""
    provider = EnvConfigProvider()
    level = (log_level or provider.get_log_config().level).upper()
    if level not in LOG_LEVELS:
        raise click.BadParameter(f"TMDB_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
    log_config.dictConfig(get_logging_config(level))

    ctx.obj = provider


@main.command()
@click.pass_context
def token(ctx: click.Context):
    """Generate a new request token."""
    client = get_client(ctx)
    try:
        request_token = client.request_token()
    except TMDbError as e:
        raise click.ClickException(e.message)

    if not request_token.success:
        raise click.ClickException(
            f"Request token was not issued: {request_token.status_message or 'unknown error'}"
        )

    click.echo(f"request_token: {request_token.request_token}")
    click.echo(f"expires_at: {request_token.expires_at.isoformat()}")


@main.command("guest-session")
@click.pass_context
def guest_session(ctx: click.Context):
    """Generate a new guest session."""
    client = get_client(ctx)
    try:
        session = client.create_guest_session()
    except TMDbError as e:
        raise click.ClickException(e.message)

    click.echo(f"guest_session_id: {session.guest_session_id}")
    if session.expires_at:
        click.echo(f"expires_at: {session.expires_at.isoformat()}")


@main.command()
@click.option("--username", "username", required=True)
@click.option("--password", "password", prompt=True, hide_input=True)
@click.pass_context
def login(ctx: click.Context, username: str, password: str):
    """Log in with username and password and create a session."""
    client = get_client(ctx)
    try:
        session = client.login_and_create_session(username, password)
    except TMDbError as e:
        raise click.ClickException(e.message)

    click.echo(f"session_id: {session.session_id}")


if __name__ == "__main__":
    main()
