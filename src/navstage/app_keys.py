"""Application keys for type-safe app configuration access."""

from aiohttp import web

from navstage.config import Config
from navstage.core.navigation import NavigationBuilder, NavigationResult

config_key = web.AppKey("config", Config)
navigation_key = web.AppKey("navigation", NavigationBuilder)
navigation_result_key = web.AppKey("navigation_result", NavigationResult)
