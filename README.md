# spacefighter

The building blocks of a 2D space shooter. It has vector maths, rectangles,
collision and trigger bit flags, keyboard and game pad state, and textures
loaded through a caching resource manager. It also has a sprite batch that
sorts and hands out draw commands, a manager for a stack of screens, and a
scoreboard that keeps the high score in a file.

The package opens no window and plays no audio. Drawing goes to a `Renderer`
that you pass to a `SpriteBatch`. Textures are read with Pillow.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `spacefighter.vector2`
  - `Vector2` is an immutable value with `x` and `y`. It supports `+`, `-`, `*` and `/` by a scalar, and unary `-`. Its methods are `length`, `length_squared`, `normalized`, `is_zero`, `dot`, `cross`, `left`, `right` and `to_point`.
  - The constants `Vector2.ZERO`, `ONE`, `UNIT_X` and `UNIT_Y` are provided.
  - The module also has `distance`, `distance_squared`, `lerp` and `random_vector`. `lerp` clamps its weight to the range 0 to 1. `random_vector` accepts an optional `random.Random`.
- `spacefighter.region`
  - `Region(x, y, width, height)` is a rectangle.
  - It has the properties `top`, `bottom`, `left`, `right`, `top_left`, `top_right`, `bottom_left`, `bottom_right` and `center`, and the methods `set` and `translate`.
  - `Region.from_position(position, size)` builds a region from a position and a size.
- `spacefighter.flags`
  - `CollisionType` has the members `NONE`, `PLAYER`, `ENEMY`, `SHIP` and `PROJECTILE`.
  - `TriggerType` has the members `NONE`, `PRIMARY`, `SECONDARY`, `SPECIAL` and `ALL`.
  - Both are `IntFlag`s. Their `contains` method is true when two values share a bit.
- `spacefighter.input`
  - The enums are `Key`, `MouseButton`, `Button` and `ButtonState`.
  - `GamePadState` holds `buttons`, `dpad`, `thumbsticks` and `triggers`. Its methods are `is_button_down`, `is_button_up` and `reset`.
- `spacefighter.resources`
  - `Resource` is the abstract base for loadable resources.
  - `Texture` is an image with `width`, `height`, `size` and `center`.
  - `ResourceManager.load(kind, path, cache=True, append_content_path=True)` loads a resource and caches it by path. It assigns each resource an id. It clones cloneable resources. It raises `ResourceLoadError` when a file cannot be read, and `TypeError` when a cached resource is of another kind.
- `spacefighter.sprite_batch`
  - `SpriteBatch` has `begin`, `draw`, `draw_region`, `draw_string`, `end` and `settings`.
  - It sorts by depth in the `BACK_TO_FRONT` and `FRONT_TO_BACK` modes of `SpriteSortMode`. In `IMMEDIATE` mode it draws at once.
  - Each draw reaches the renderer as a `DrawCommand`. The base `Renderer` only records the commands, blend states and transforms it receives. Subclass it to draw on a real surface.
- `spacefighter.screen_manager`
  - `ScreenManager` keeps a stack of screens. It passes input and updates from the top screen down, and draws from the bottom up.
  - Each screen decides whether input, updates and drawing go on to the screens below it.
  - Screens that need to be removed are unloaded after the update. Their `on_remove` callback runs first.
  - The `game` given to the manager must provide `resource_manager`.
- `spacefighter.scoring`
  - `Scoreboard(path="highscore.txt")` keeps `score` and `high_score`.
  - `load_high_score` reads the file. A missing or unreadable file gives 0.
  - `increase` adds one point and writes a new high score to the file at once.

## Example

```python
from spacefighter.vector2 import Vector2, lerp
from spacefighter.flags import CollisionType
from spacefighter.sprite_batch import SpriteBatch, SpriteSortMode
from spacefighter.resources import Texture
from PIL import Image

v = Vector2(3, 4)
print(v.length())                      # 5.0
print(lerp(Vector2(0, 0), v, 0.5))     # { 1.5, 2 }

enemy_ship = CollisionType.ENEMY | CollisionType.SHIP
print(enemy_ship.contains(CollisionType.SHIP))   # True

batch = SpriteBatch()
texture = Texture(Image.new("RGBA", (8, 8)))
batch.begin(SpriteSortMode.BACK_TO_FRONT)
batch.draw(texture, Vector2(10, 0), depth=2)
batch.draw(texture, Vector2(20, 0), depth=1)
batch.end()
print([c.x for c in batch.renderer.commands])    # [20, 10]
```

## What this package does not do

There are no game objects, ships, weapons, projectiles, levels or collision
handling, so you cannot play a game with this package. It has no main loop,
no window, no audio and no command-line program. It provides the engine
pieces and the scoreboard only. Screens for `ScreenManager` and the drawing
surface behind `Renderer` must come from your own code.