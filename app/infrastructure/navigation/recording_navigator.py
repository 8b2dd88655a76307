from __future__ import annotations

import logging

from app.application.ports.navigation import NavigationPort


class RecordingNavigator(NavigationPort):
    def __init__(self) -> None:
        self._routes: list[str] = []
        self._logger = logging.getLogger(__name__)

    def go_to(self, route: str) -> None:
        self._logger.info("Navigate", extra={"route": route})
        self._routes.append(route)

    @property
    def routes(self) -> list[str]:
        return list(self._routes)

    @property
    def last_route(self) -> str | None:
        return self._routes[-1] if self._routes else None

    def drain(self) -> str | None:
        last = self.last_route
        self._routes = []
        return last
