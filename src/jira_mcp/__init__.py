import asyncio
import locale
import logging
import os

import click
from dotenv import load_dotenv

from jira_mcp.utils.logging import setup_logging

__version__ = "1.0.0"

TRANSPORTS = ("stdio", "sse", "streamable-http")
TRUTHY = ("true", "1", "yes")

# CLI option name -> environment variable read by JiraConfig and the lifespan
OPTION_ENV_VARS = {
    "jira_url": "JIRA_BASE_URL",
    "jira_email": "JIRA_EMAIL",
    "jira_token": "JIRA_API_TOKEN",
    "jira_ssl_verify": "JIRA_SSL_VERIFY",
    "read_only": "READ_ONLY_MODE",
}

logger = setup_logging(
    logging.DEBUG
    if os.getenv("MCP_VERBOSE", "").lower() in TRUTHY
    else logging.WARNING
)


def _logging_level(verbose: int) -> int:
    """Map -v/-vv, or MCP_VERY_VERBOSE/MCP_VERBOSE when no flag is given."""
    if verbose >= 2 or (
        not verbose and os.getenv("MCP_VERY_VERBOSE", "").lower() in TRUTHY
    ):
        return logging.DEBUG
    if verbose == 1 or os.getenv("MCP_VERBOSE", "").lower() in TRUTHY:
        return logging.INFO
    return logging.WARNING


def _was_option_provided(ctx: click.Context | None, param_name: str) -> bool:
    if ctx is None:
        return False
    return ctx.get_parameter_source(param_name) not in (
        click.core.ParameterSource.DEFAULT,
        click.core.ParameterSource.DEFAULT_MAP,
    )


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(TRANSPORTS),
    default="stdio",
    help="Transport type (stdio, sse, or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE or Streamable HTTP transport",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to for SSE or Streamable HTTP transport (default: 0.0.0.0)",
)
@click.option(
    "--path",
    default="/mcp",
    help="Path for Streamable HTTP transport (e.g., /mcp).",
)
@click.option(
    "--jira-url",
    help="Jira Cloud base URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Email address of the Jira account")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (rejects issue create and update)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    path: str | None,
    jira_url: str | None,
    jira_email: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool,
    read_only: bool,
) -> None:
    """Jira MCP Server - Jira Cloud issue tools for MCP

    Authenticates with an account email and API token (HTTP Basic).
    """
    global logger
    logging_level = _logging_level(verbose)
    logger = setup_logging(logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(logging_level)}")

    # Report dates in the user's locale
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.debug(f"Could not apply the user's LC_TIME locale: {e}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
    load_dotenv(env_file, override=True)

    click_ctx = click.get_current_context(silent=True)
    options = click_ctx.params if click_ctx else {}

    # CLI options win over the environment
    final_transport = os.getenv("TRANSPORT", "stdio").lower()
    if _was_option_provided(click_ctx, "transport"):
        final_transport = transport
    if final_transport not in TRANSPORTS:
        logger.warning(f"Invalid transport '{final_transport}', using 'stdio'.")
        final_transport = "stdio"

    final_port = int(os.getenv("PORT", "")) if os.getenv("PORT", "").isdigit() else 8000
    if _was_option_provided(click_ctx, "port"):
        final_port = port

    final_host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    if _was_option_provided(click_ctx, "host"):
        final_host = host

    final_path = os.getenv("STREAMABLE_HTTP_PATH")
    if _was_option_provided(click_ctx, "path"):
        final_path = path

    for option, env_var in OPTION_ENV_VARS.items():
        if _was_option_provided(click_ctx, option):
            value = options[option]
            os.environ[env_var] = str(value).lower() if isinstance(value, bool) else value

    from jira_mcp.servers import main_mcp

    run_kwargs: dict = {"transport": final_transport}
    if final_transport != "stdio":
        run_kwargs.update(
            host=final_host,
            port=final_port,
            log_level=logging.getLevelName(logging_level).lower(),
        )
        if final_path is not None:
            run_kwargs["path"] = final_path
        logger.info(
            f"Serving {final_transport} on http://{final_host}:{final_port}"
            f"{final_path or ''}"
        )

    # stdout belongs to the protocol; the startup notice goes to stderr
    click.echo(f"Jira MCP server running on {final_transport}", err=True)
    asyncio.run(main_mcp.run_async(**run_kwargs))


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
