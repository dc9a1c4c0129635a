"""aiohttp server for Navstage.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from navstage.api.sidebar import create_sidebar_routes
from navstage.app_keys import config_key, navigation_key, navigation_result_key
from navstage.config import Config
from navstage.core.navigation import NavigationBuilder

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    The sidebar is resolved once on startup and served from memory for the
    lifetime of the application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[config_key] = config
    app[navigation_key] = NavigationBuilder(config)

    app.router.add_routes(create_sidebar_routes())
    app.on_startup.append(_build_navigation)

    return app


async def _build_navigation(app: web.Application) -> None:
    """Resolve the sidebar on application startup."""
    result = await app[navigation_key].build()
    if not result.ok:
        logger.warning("Serving sidebar with unresolved groups or fatal issues")
    app[navigation_result_key] = result


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
