"""Batched sprite and text drawing with optional depth sorting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from spacefighter.region import Region
from spacefighter.vector2 import Vector2

Color = tuple[float, float, float, float]
WHITE: Color = (1.0, 1.0, 1.0, 1.0)


class TextAlign(Enum):
    """Horizontal alignment of drawn text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class SpriteSortMode(Enum):
    """How queued sprites are ordered before they are rendered."""

    BACK_TO_FRONT = 0
    DEFERRED = 1
    FRONT_TO_BACK = 2
    IMMEDIATE = 3
    TEXTURE = 4


class BlendState(Enum):
    """How overlapping sprites are blended."""

    ALPHA = 0
    ADDITIVE = 1


@dataclass
class DrawCommand:
    """One queued bitmap or text draw."""

    is_bitmap: bool
    x: int
    y: int
    color: Color = WHITE
    depth: float = 0.0
    texture: Any = None
    source: Region | None = None
    origin: tuple[int, int] = (0, 0)
    scale: tuple[float, float] = (1.0, 1.0)
    rotation: float = 0.0
    resource_id: int | None = None
    font: Any = None
    text: str = ""
    alignment: TextAlign = TextAlign.LEFT


class Renderer:
    """Receives the output of a SpriteBatch.

    This base class records what it receives; a subclass that draws to a
    real surface overrides the three methods.
    """

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []
        self.blend_state: BlendState | None = None
        self.transform: Any = None
        self.transform_history: list[Any] = []

    def draw(self, command: DrawCommand) -> None:
        """Render one command."""
        self.commands.append(command)

    def set_blend(self, blend_state: BlendState) -> None:
        """Select the blending used for following draws."""
        self.blend_state = blend_state

    def set_transform(self, transform: Any) -> None:
        """Select the screen transform; None means the identity."""
        self.transform = transform
        self.transform_history.append(transform)


class SpriteBatch:
    """Collects draws between begin() and end() and sends them to a renderer."""

    def __init__(self, renderer: Renderer | None = None) -> None:
        self.renderer = renderer if renderer is not None else Renderer()
        self._pending: list[DrawCommand] = []
        self._sort_mode = SpriteSortMode.DEFERRED
        self._blend_state = BlendState.ALPHA
        self._transform: Any = None
        self._started = False

    @property
    def is_started(self) -> bool:
        """True between begin() and end()."""
        return self._started

    def begin(
        self,
        sort_mode: SpriteSortMode = SpriteSortMode.DEFERRED,
        blend_state: BlendState = BlendState.ALPHA,
        transform: Any = None,
    ) -> None:
        """Start a batch with the given sorting, blending and transform."""
        self._started = True
        self._sort_mode = sort_mode
        if sort_mode is SpriteSortMode.IMMEDIATE:
            if transform is not None:
                self.renderer.set_transform(transform)
        else:
            self._transform = transform
        self._blend_state = blend_state
        self.renderer.set_blend(blend_state)

    def end(self) -> None:
        """Flush queued draws and restore the identity transform."""
        if self._sort_mode is not SpriteSortMode.IMMEDIATE:
            if self._transform is not None:
                self.renderer.set_transform(self._transform)
            pending = self._pending
            if self._sort_mode is SpriteSortMode.BACK_TO_FRONT:
                pending = sorted(pending, key=lambda command: command.depth)
            elif self._sort_mode is SpriteSortMode.FRONT_TO_BACK:
                pending = sorted(pending, key=lambda command: command.depth, reverse=True)
            for command in pending:
                self.renderer.draw(command)
        self._pending.clear()
        self.renderer.set_transform(None)
        self._started = False

    def _require_started(self) -> None:
        if not self._started:
            raise RuntimeError("begin must be called before drawing")

    def _submit(self, command: DrawCommand) -> None:
        if self._sort_mode is SpriteSortMode.IMMEDIATE:
            self.renderer.draw(command)
        else:
            self._pending.append(command)

    def draw(
        self,
        texture: Any,
        position: Vector2,
        color: Color = WHITE,
        origin: Vector2 = Vector2.ZERO,
        scale: Vector2 = Vector2.ONE,
        rotation: float = 0.0,
        depth: float = 0.0,
    ) -> None:
        """Queue the whole texture at position."""
        self.draw_region(
            texture,
            position,
            Region(0, 0, texture.width, texture.height),
            color,
            origin,
            scale,
            rotation,
            depth,
        )

    def draw_region(
        self,
        texture: Any,
        position: Vector2,
        region: Region,
        color: Color = WHITE,
        origin: Vector2 = Vector2.ZERO,
        scale: Vector2 = Vector2.ONE,
        rotation: float = 0.0,
        depth: float = 0.0,
    ) -> None:
        """Queue the given region of the texture at position."""
        self._require_started()
        self._submit(
            DrawCommand(
                is_bitmap=True,
                x=int(position.x),
                y=int(position.y),
                color=color,
                depth=depth,
                texture=texture,
                source=Region(region.x, region.y, region.width, region.height),
                origin=(int(origin.x), int(origin.y)),
                scale=(scale.x, scale.y),
                rotation=rotation,
                resource_id=getattr(texture, "resource_id", None),
            )
        )

    def draw_string(
        self,
        font: Any,
        text: str,
        position: Vector2,
        color: Color = WHITE,
        alignment: TextAlign = TextAlign.LEFT,
        depth: float = 0.0,
    ) -> None:
        """Queue text drawn with font at position."""
        if font is None:
            raise ValueError("font is missing")
        if not text:
            raise ValueError("text is empty")
        self._submit(
            DrawCommand(
                is_bitmap=False,
                x=int(position.x),
                y=int(position.y),
                color=color,
                depth=depth,
                font=font,
                text=text,
                alignment=alignment,
            )
        )

    def settings(self) -> tuple[SpriteSortMode, BlendState, Any]:
        """Return the sort mode, blend state and stored transform of the running batch."""
        if not self._started:
            raise RuntimeError("begin must be called before the settings can be retrieved")
        return (self._sort_mode, self._blend_state, self._transform)