"""
Report server.

Serves the activity report as an HTML page, rebuilt on every request.
"""

import logging
import os
import sys
from collections.abc import Callable, Mapping

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from repo_activity import __version__
from repo_activity.client import RepoActivityClient
from repo_activity.config import ReportOptions
from repo_activity.exceptions import ConfigurationError, FetchError
from repo_activity.logging import configure_logging, get_logger, log_server_request
from repo_activity.render.html import render_html

logger = get_logger("server")

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
SHUTDOWN_GRACE_PERIOD = 20

ClientFactory = Callable[[ReportOptions], RepoActivityClient]


def parse_days_param(value: str | None) -> int | None:
    """Days override from the query string; invalid values are ignored."""
    if value is None or not value.strip():
        return None
    try:
        days = int(value)
    except ValueError:
        return None
    return days if days >= 0 else None


def create_app(
    options: ReportOptions,
    client_factory: ClientFactory = RepoActivityClient,
) -> FastAPI:
    """
    Create the report application.

    Args:
        options: Base configuration; never modified by requests
        client_factory: Builds a client for one request's options
    """
    app = FastAPI(title="GitHub Activity Report", version=__version__)
    app.state.options = options

    @app.get("/", response_class=HTMLResponse)
    def report(request: Request) -> Response:
        log_server_request(
            request.headers.get("host", ""),
            request.method,
            request.url.path + (f"?{request.url.query}" if request.url.query else ""),
        )

        request_options = options
        days = parse_days_param(request.query_params.get("days"))
        if days is not None:
            request_options = options.with_days(days)

        try:
            with client_factory(request_options) as client:
                activity = client.build_report()
        except FetchError as e:
            logger.error("report build failed: %s", e)
            return PlainTextResponse(str(e), status_code=500)

        return HTMLResponse(render_html(activity, request_options))

    return app


def serve(
    options: ReportOptions,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """
    Run the report server until SIGINT or SIGTERM.

    In-flight requests get ``SHUTDOWN_GRACE_PERIOD`` seconds to finish.
    """
    app = create_app(options)
    logger.info("listening on %s:%d", host, port)
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info",
        timeout_graceful_shutdown=SHUTDOWN_GRACE_PERIOD,
    )
    logger.info("shutdown completed")


def main(environ: Mapping[str, str] | None = None) -> int:
    """
    Server entry point, configured from the environment.

    Environment variables:
        REPORT_REPOS, REPORT_DAYS, GITHUB_ENDPOINT, GITHUB_TOKEN: see ReportOptions.from_env
        HOST: Listen address (default: 0.0.0.0)
        PORT: Listen port (default: 3000)
    """
    env = os.environ if environ is None else environ
    configure_logging(level=logging.INFO)

    try:
        options = ReportOptions.from_env(env)
        port = int(env.get("PORT") or DEFAULT_PORT)
    except ConfigurationError as e:
        logger.error("%s", e.message)
        return 1
    except ValueError:
        logger.error("can not parse PORT: %r", env.get("PORT"))
        return 1

    if not options.authenticated:
        logger.warning("GITHUB_TOKEN not configured, using anonymous access")

    serve(options, host=env.get("HOST") or DEFAULT_HOST, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
