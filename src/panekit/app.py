"""Top-level application: initializes pygame and feeds its events to the router."""

from __future__ import annotations

import logging

import pygame

from panekit.adapter import PygameEventRouter, set_default_adapter
from panekit.config import BACKGROUND, FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from panekit.views.base import View

logger = logging.getLogger(__name__)


class App:
    def __init__(self, size: tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.router = PygameEventRouter()
        set_default_adapter(self.router)

        self.root = View(self.screen.get_rect(), name="root")

    def run(self) -> None:
        running = True
        while running:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self.router.feed_event(event)
            self.screen.fill(BACKGROUND)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        self.root.destroy()
        set_default_adapter(None)
        logger.debug("Router left with bindings for %s", self.router.bound_names())
