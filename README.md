# gfcsprites

A small library for the logic side of 2D game sprites. It covers geometry with
pivot points and rotation, velocity and rotational motion, and hit tests
between points, circles, rectangles and other sprites. It also handles
frame-based animation over named image sets, sprite-sheet tile selection, and
timed dying and deletion.

It deals in numbers and objects only. An image is any object with `width` and
`height` attributes. The library never draws, loads or decodes images itself.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gfcsprites.geometry` has two value types.
  - `Vector` is an immutable 2D vector with `+`, `-`, unary `-`, and `*` and
    `/` by a number or component-wise by another vector. It also has
    `length()` and `normalized()`.
  - `Rectangle(x, y, w, h)` is given by its bottom-left corner and its size.
    It has `center_x()`, `center_y()`, `left`/`right`/`bottom`/`top`,
    `intersects(other)` and `grow(left, top, right, bottom)`.
- `gfcsprites.sheet` selects tiles from a sprite sheet.
  - Selections are written fluently: `sheet(cols, rows).row(i).start(j).to(k)`,
    `.col(i).start(j).to(k)` or `.tile(col, row)`.
  - `Sheet.tiles()` lists the `(col, row)` pairs in animation order.
  - `tile_sequence(...)` yields the same pairs for an explicit block. Negative
    or out-of-range indices are clamped, and ranges may run backwards.
- `gfcsprites.properties` has `Property` and `PropertyStore`, which hold named
  values on a sprite.
  - Each label has one unindexed value (`set`/`get`) and a list of indexed
    values (`set_indexed`, `add`, `get_indexed`, `index_count`).
  - `copy()` makes a deep copy of the store.
- `gfcsprites.sprite` has `Sprite`, which provides:
  - position;
  - local and global sides;
  - size and pivot (`set_pivot`, `set_pivot_local`, `set_pivot_rel`, `set_pivot_from_center`);
  - coordinate conversion (`global_to_local`, `local_to_global`);
  - rectangles (`client_rect`, `bounding_rect`, `no_rot_bounding_rect`);
  - motion (`set_velocity`, `set_direction`, `proceed`, `accelerate`, `apply_force`);
  - rotation (`rotation`, `rotate`, `omega`);
  - images and animation (`set_image`, `set_animation`, `set_animation_keep_size`, `is_animation_playing`);
  - hit tests (`hit_test_point`, `hit_test_circle`, `hit_test_rect`, `hit_test_sprite`);
  - deletion and dying (`delete`, `die`, `is_dead`);
  - `update(game_time)` for each frame, with `on_update` to override.

## Example

```python
from gfcsprites.sprite import Sprite

ball = Sprite(100, 100, 20, 20)
ball.set_velocity(50, 0)      # 50 pixels per second to the right
ball.omega = 90               # 90 degrees per second
ball.update(1000)             # advance to game time 1000 ms

wall = Sprite(160, 100, 10, 200)
if ball.hit_test_sprite(wall):
    ball.die(500)             # deleted by update() once 500 ms have passed
```

Animation over images stored under a name:

```python
from dataclasses import dataclass

@dataclass
class Frame:
    width: int
    height: int

hero = Sprite(0, 0)
hero.properties.add("walk", Frame(16, 24))
hero.properties.add("walk", Frame(18, 24))
hero.set_animation("walk", fps=10)
hero.update(0)
hero.update(150)
print(hero.current_animation_frame)   # 1
```

Sprite sheets:

```python
from gfcsprites.sheet import sheet

walk = sheet(8, 4).row(2).start(0).to(7)
for col, row in walk.tiles():
    ...
```

## What it does not do

- There is no game loop, window, event dispatch or game-state object such as
  modes, levels or pausing. You call `Sprite.update` from your own loop.
- There is no drawing, image loading or cutting of sheet images.
  `gfcsprites.sheet` only tells you which tiles to take.
- `hit_test_sprite` compares the rotated bounding boxes of the two sprites.
  It does no pixel-level collision.