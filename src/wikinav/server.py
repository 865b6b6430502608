"""aiohttp server for Wikinav.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from wikinav.api.navigation import create_navigation_routes
from wikinav.app_keys import source_dir_key
from wikinav.config import Config
from wikinav.core.filters import is_navigable_directory
from wikinav.core.scanner import scan

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[source_dir_key] = config.docs.source_dir
    app.router.add_routes(create_navigation_routes())
    return app


def check_source_dir(config: Config) -> None:
    """Verify the document root can be listed.

    Raises:
        ScanError: If the document root can't be listed
    """
    scan(config.docs.source_dir, is_navigable_directory)


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration

    Raises:
        ScanError: If the document root can't be listed
    """
    check_source_dir(config)
    logger.info(f"Serving navigation for {config.docs.source_dir}")

    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
