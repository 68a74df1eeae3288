"""Ordering of input, updates and drawing across a stack of screens."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from spacefighter.sprite_batch import BlendState, SpriteBatch, SpriteSortMode
from spacefighter.vector2 import Vector2


class Screen(Protocol):
    """What the manager expects from a screen."""

    screen_manager: Any
    on_remove: Callable[[Any], None] | None
    render_target: Any
    render_target_color: Any

    def load_content(self, resource_manager: Any) -> None: ...

    def unload_content(self) -> None: ...

    def needs_to_be_removed(self) -> bool: ...

    def handle_input(self, input_state: Any) -> None: ...

    def handle_input_below(self) -> bool: ...

    def update_transition(self, game_time: Any) -> None: ...

    def update(self, game_time: Any) -> None: ...

    def update_below(self) -> bool: ...

    def draw(self, sprite_batch: SpriteBatch) -> None: ...

    def draw_below(self) -> bool: ...


class ScreenManager:
    """Keeps a stack of screens; the last one added is on top."""

    def __init__(
        self,
        game: Any,
        select_render_target: Callable[[Any], None] | None = None,
    ) -> None:
        self.game = game
        self._select_render_target = select_render_target
        self._screens: list[Screen] = []
        self._to_add: list[Screen] = []

    @property
    def resource_manager(self) -> Any:
        """The game's resource manager."""
        return self.game.resource_manager

    @property
    def screens(self) -> tuple[Screen, ...]:
        """Active screens, bottom first."""
        return tuple(self._screens)

    def add_screen(self, screen: Screen) -> None:
        """Load the screen's content; it joins the stack on the next update."""
        screen.screen_manager = self
        screen.load_content(self.resource_manager)
        self._to_add.append(screen)

    def handle_input(self, input_state: Any) -> None:
        """Pass input from the top screen down while screens allow it."""
        passing = True
        for screen in reversed(self._screens):
            if not passing:
                break
            if not screen.needs_to_be_removed():
                screen.handle_input(input_state)
                passing = screen.handle_input_below()

    def update(self, game_time: Any) -> None:
        """Add pending screens, update from the top down and drop finished screens."""
        if self._to_add:
            self._screens.extend(self._to_add)
            self._to_add.clear()

        to_remove: list[Screen] = []
        updating = True
        for screen in reversed(self._screens):
            screen.update_transition(game_time)
            if screen.needs_to_be_removed():
                to_remove.append(screen)
            elif updating:
                screen.update(game_time)
                updating = screen.update_below()

        for screen in to_remove:
            if screen.on_remove is not None:
                screen.on_remove(screen)
            screen.unload_content()
            self._screens = [other for other in self._screens if other is not screen]

    def draw(self, sprite_batch: SpriteBatch) -> None:
        """Draw visible screens from the bottom up."""
        visible: list[Screen] = []
        for screen in reversed(self._screens):
            if screen.needs_to_be_removed():
                continue
            visible.append(screen)
            if not screen.draw_below():
                break

        for screen in reversed(visible):
            target = screen.render_target
            if target is not None and self._select_render_target is not None:
                self._select_render_target(target)
            screen.draw(sprite_batch)
            if target is not None:
                if self._select_render_target is not None:
                    self._select_render_target(None)
                sprite_batch.begin(SpriteSortMode.DEFERRED, BlendState.ALPHA)
                sprite_batch.draw(target, Vector2.ZERO, screen.render_target_color)
                sprite_batch.end()