from PIL import Image

from spacefighter.resources import Texture
from spacefighter.screen_manager import ScreenManager
from spacefighter.sprite_batch import WHITE, Renderer, SpriteBatch


class FakeGame:
    def __init__(self):
        self.resource_manager = object()


class FakeScreen:
    def __init__(self, name, log, *, input_below=True, update_below=True, draw_below=True):
        self.name = name
        self.log = log
        self.removed = False
        self.input_below = input_below
        self.below = update_below
        self.drawn_below = draw_below
        self.screen_manager = None
        self.on_remove = None
        self.render_target = None
        self.render_target_color = WHITE
        self.loaded_with = None

    def load_content(self, resource_manager):
        self.loaded_with = resource_manager

    def unload_content(self):
        self.log.append((self.name, "unload"))

    def needs_to_be_removed(self):
        return self.removed

    def handle_input(self, input_state):
        self.log.append((self.name, "input"))

    def handle_input_below(self):
        return self.input_below

    def update_transition(self, game_time):
        self.log.append((self.name, "transition"))

    def update(self, game_time):
        self.log.append((self.name, "update"))

    def update_below(self):
        return self.below

    def draw(self, sprite_batch):
        self.log.append((self.name, "draw"))

    def draw_below(self):
        return self.drawn_below


def make_manager(*screens):
    manager = ScreenManager(FakeGame())
    for screen in screens:
        manager.add_screen(screen)
    manager.update(None)
    return manager


def test_add_screen_loads_content_and_defers_adding():
    log = []
    game = FakeGame()
    manager = ScreenManager(game)
    screen = FakeScreen("a", log)
    manager.add_screen(screen)
    assert screen.screen_manager is manager
    assert screen.loaded_with is game.resource_manager
    assert manager.screens == ()
    manager.update(None)
    assert manager.screens == (screen,)


def test_resource_manager_comes_from_game():
    game = FakeGame()
    assert ScreenManager(game).resource_manager is game.resource_manager


def test_handle_input_stops_at_blocking_screen():
    log = []
    bottom = FakeScreen("bottom", log)
    middle = FakeScreen("middle", log, input_below=False)
    top = FakeScreen("top", log)
    manager = make_manager(bottom, middle, top)
    log.clear()
    manager.handle_input(None)
    assert log == [("top", "input"), ("middle", "input")]
    assert manager.screens == (bottom, middle, top)


def test_update_transitions_all_but_updates_until_blocked():
    log = []
    bottom = FakeScreen("bottom", log)
    top = FakeScreen("top", log, update_below=False)
    manager = make_manager(bottom, top)
    log.clear()
    manager.update(None)
    assert log == [
        ("top", "transition"),
        ("top", "update"),
        ("bottom", "transition"),
    ]
    assert manager.screens == (bottom, top)


def test_removed_screen_is_called_back_and_dropped():
    log = []
    removed = []
    bottom = FakeScreen("bottom", log)
    top = FakeScreen("top", log)
    top.on_remove = removed.append
    manager = make_manager(bottom, top)
    top.removed = True
    log.clear()
    manager.update(None)
    assert removed == [top]
    assert ("top", "unload") in log
    assert ("top", "update") not in log
    assert manager.screens == (bottom,)


def test_removed_screen_gets_no_input():
    log = []
    bottom = FakeScreen("bottom", log)
    top = FakeScreen("top", log)
    manager = make_manager(bottom, top)
    top.removed = True
    log.clear()
    manager.handle_input(None)
    assert log == [("bottom", "input")]
    assert manager.screens == (bottom, top)


def test_draw_goes_bottom_up_and_stops_at_opaque_screen():
    log = []
    hidden = FakeScreen("hidden", log)
    opaque = FakeScreen("opaque", log, draw_below=False)
    top = FakeScreen("top", log)
    manager = make_manager(hidden, opaque, top)
    log.clear()
    batch = SpriteBatch()
    manager.draw(batch)
    assert log == [("opaque", "draw"), ("top", "draw")]
    assert manager.screens == (hidden, opaque, top)
    assert not batch.is_started


def test_render_target_is_selected_and_blitted():
    log = []
    selections = []
    target = Texture(Image.new("RGBA", (4, 4)))
    screen = FakeScreen("a", log)
    screen.render_target = target
    manager = ScreenManager(FakeGame(), selections.append)
    manager.add_screen(screen)
    manager.update(None)
    batch = SpriteBatch(Renderer())
    manager.draw(batch)
    assert selections == [target, None]
    assert log[-1] == ("a", "draw")
    command = batch.renderer.commands[-1]
    assert command.texture is target
    assert (command.x, command.y) == (0, 0)
    assert not batch.is_started