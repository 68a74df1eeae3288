import pytest
from PIL import Image

from spacefighter.region import Region
from spacefighter.resources import Texture
from spacefighter.sprite_batch import (
    WHITE,
    BlendState,
    Renderer,
    SpriteBatch,
    SpriteSortMode,
    TextAlign,
)
from spacefighter.vector2 import Vector2


@pytest.fixture
def texture():
    return Texture(Image.new("RGBA", (8, 4)))


@pytest.fixture
def batch():
    return SpriteBatch(Renderer())


def test_draw_without_begin_raises(batch, texture):
    with pytest.raises(RuntimeError):
        batch.draw(texture, Vector2(1, 2))


def test_settings_without_begin_raises(batch):
    with pytest.raises(RuntimeError):
        batch.settings()


def test_begin_applies_blend_and_settings(batch):
    batch.begin(SpriteSortMode.BACK_TO_FRONT, BlendState.ADDITIVE, "t")
    assert batch.renderer.blend_state is BlendState.ADDITIVE
    assert batch.settings() == (SpriteSortMode.BACK_TO_FRONT, BlendState.ADDITIVE, "t")
    assert batch.is_started


def test_deferred_draws_on_end_in_order(batch, texture):
    batch.begin()
    batch.draw(texture, Vector2(1, 1), depth=5)
    batch.draw(texture, Vector2(2, 2), depth=1)
    assert batch.renderer.commands == []
    batch.end()
    assert [c.x for c in batch.renderer.commands] == [1, 2]
    assert not batch.is_started


def test_immediate_draws_at_once(batch, texture):
    batch.begin(SpriteSortMode.IMMEDIATE)
    batch.draw(texture, Vector2(3, 4))
    assert len(batch.renderer.commands) == 1
    batch.end()
    assert len(batch.renderer.commands) == 1


def test_back_to_front_sorts_ascending_depth(batch, texture):
    batch.begin(SpriteSortMode.BACK_TO_FRONT)
    for depth in (3.0, 1.0, 2.0):
        batch.draw(texture, Vector2.ZERO, depth=depth)
    batch.end()
    depths = [c.depth for c in batch.renderer.commands]
    assert depths == sorted(depths)


def test_front_to_back_sorts_descending_depth(batch, texture):
    batch.begin(SpriteSortMode.FRONT_TO_BACK)
    for depth in (3.0, 1.0, 2.0):
        batch.draw(texture, Vector2.ZERO, depth=depth)
    batch.end()
    depths = [c.depth for c in batch.renderer.commands]
    assert depths == sorted(depths, reverse=True)


def test_draw_uses_whole_texture(batch, texture):
    batch.begin()
    batch.draw(texture, Vector2(4.7, 2.2), origin=texture.center, rotation=0.5)
    batch.end()
    command = batch.renderer.commands[0]
    assert command.is_bitmap
    assert command.source == Region(0, 0, texture.width, texture.height)
    assert (command.x, command.y) == (int(4.7), int(2.2))
    assert command.origin == (int(texture.center.x), int(texture.center.y))
    assert command.rotation == 0.5
    assert command.color == WHITE


def test_draw_region_uses_region(batch, texture):
    batch.begin()
    batch.draw_region(texture, Vector2.ZERO, Region(1, 2, 3, 2), scale=Vector2(2, 3))
    batch.end()
    command = batch.renderer.commands[0]
    assert command.source == Region(1, 2, 3, 2)
    assert command.scale == (2, 3)


def test_draw_string_queues_text(batch):
    batch.begin()
    batch.draw_string("font", "Score: 1", Vector2(50, 850), alignment=TextAlign.CENTER)
    batch.end()
    command = batch.renderer.commands[0]
    assert not command.is_bitmap
    assert command.text == "Score: 1"
    assert command.font == "font"
    assert command.alignment is TextAlign.CENTER
    assert (command.x, command.y) == (50, 850)


def test_draw_string_rejects_empty_text(batch):
    batch.begin()
    with pytest.raises(ValueError):
        batch.draw_string("font", "", Vector2.ZERO)


def test_draw_string_rejects_missing_font(batch):
    batch.begin()
    with pytest.raises(ValueError):
        batch.draw_string(None, "hello", Vector2.ZERO)


def test_deferred_transform_applied_then_reset(batch, texture):
    batch.begin(transform="camera")
    batch.draw(texture, Vector2.ZERO)
    batch.end()
    assert batch.renderer.transform_history == ["camera", None]
    assert batch.renderer.transform is None


def test_immediate_transform_applied_at_begin(batch):
    batch.begin(SpriteSortMode.IMMEDIATE, transform="camera")
    assert batch.renderer.transform == "camera"
    batch.end()
    assert batch.renderer.transform is None


def test_end_clears_queue(batch, texture):
    batch.begin()
    batch.draw(texture, Vector2.ZERO)
    batch.end()
    batch.begin()
    batch.end()
    assert len(batch.renderer.commands) == 1