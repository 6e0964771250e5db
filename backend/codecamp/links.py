"""Canonical resource paths built from named FastAPI routes."""

import logging
from typing import Optional

from fastapi import Request
from starlette.routing import Match, NoMatchFound

logger = logging.getLogger("codecamp.api")


class LinkGenerator:
    """Build URL paths for named routes of an application.

    `get_path` returns `None` instead of raising when the route is
    unknown, a parameter cannot be placed in the path (empty values or
    values containing `/`), or the built path would be served by a
    different route (a moniker of `search` lands on the search endpoint).
    """

    def __init__(self, app):
        self.app = app

    def get_path(self, route_name: str, **params) -> Optional[str]:
        for name, value in params.items():
            text = str(value)
            if not text or "/" in text:
                logger.debug("could not build path for %s: %s=%r is not a path segment", route_name, name, value)
                return None
        try:
            path = str(self.app.url_path_for(route_name, **params))
        except NoMatchFound as e:
            logger.debug("could not build path for %s %s: %s", route_name, params, e)
            return None
        served_by = self._route_for(path, "GET")
        if served_by is None or served_by.name != route_name:
            logger.debug("path %s for %s is served by another route", path, route_name)
            return None
        return path

    def _route_for(self, path: str, method: str):
        scope = {"type": "http", "path": path, "root_path": "", "method": method}
        for route in self.app.router.routes:
            match, _ = route.matches(scope)
            if match == Match.FULL:
                return route
        return None


def get_link_generator(request: Request) -> LinkGenerator:
    """FastAPI dependency returning a `LinkGenerator` for the running app."""
    return LinkGenerator(request.app)
