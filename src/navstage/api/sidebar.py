"""Sidebar API endpoints.

Serves the sidebar resolved at application startup.
"""

from aiohttp import web

from navstage.app_keys import config_key, navigation_result_key


def create_sidebar_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/sidebar", get_sidebar),
        web.get("/api/sidebar/{group}", get_sidebar_group),
        web.get("/api/navigation/top", get_top_navigation),
    ]


async def get_sidebar(request: web.Request) -> web.Response:
    result = request.app[navigation_result_key]
    return web.json_response(result.to_dict())


async def get_sidebar_group(request: web.Request) -> web.Response:
    group = request.match_info["group"]
    result = request.app[navigation_result_key]

    error = result.errors.get(group)
    if error is not None:
        return web.json_response({"error": str(error), "group": group}, status=500)

    items = result.groups.get(group)
    if items is None:
        return web.json_response(
            {"error": "Sidebar group not found", "group": group},
            status=404,
        )

    return web.json_response(
        {"group": group, "items": [item.to_dict() for item in items]},
    )


async def get_top_navigation(request: web.Request) -> web.Response:
    top = request.app[config_key].navigation.top or []
    return web.json_response({"items": [item.to_dict() for item in top]})
