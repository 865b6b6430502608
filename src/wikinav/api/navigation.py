"""Navigation API endpoints.

Returns menu, side menu and breadcrumbs of a document as JSON.
"""

import logging

from aiohttp import web

from wikinav.app_keys import source_dir_key
from wikinav.core.navigation import PageNavigator
from wikinav.core.page import PageContext
from wikinav.core.scanner import ScanError

logger = logging.getLogger(__name__)


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/{path:.*}", get_navigation),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    path = request.match_info.get("path", "")
    source_dir = request.app[source_dir_key]

    try:
        context = PageContext.resolve(source_dir, path)
    except FileNotFoundError:
        return web.json_response(
            {"error": "Page not found", "path": path},
            status=404,
        )

    navigator = PageNavigator(context, source_dir)
    try:
        navigation = navigator.build()
    except ScanError as e:
        logger.error(f"Navigation failed for /{path}: {e}")
        return web.json_response(
            {"error": "Navigation unavailable", "path": path, "detail": str(e)},
            status=500,
        )

    return web.json_response(
        {
            "path": context.base_path,
            "is_home": context.is_home,
            **navigation.to_dict(),
        }
    )
