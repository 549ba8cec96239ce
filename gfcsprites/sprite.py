"""Sprites: positioned, sized, rotatable and animated game objects."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from gfcsprites.geometry import Rectangle, Vector
from gfcsprites.properties import PropertyStore

MAX_INT32 = 2**31 - 1

Point = Union[Vector, Sequence[float]]


@dataclass(frozen=True)
class _BlankImage:
    """Stands in for an animation that was not found."""

    width: int = 0
    height: int = 0


_MISSING_IMAGE = _BlankImage()


def _vec(a: Any, b: Optional[float] = None) -> Vector:
    if isinstance(a, Vector):
        return a
    if b is None:
        x, y = a
        return Vector(float(x), float(y))
    return Vector(float(a), float(b))


class Sprite:
    """A game object with a pivot point, a size, motion, rotation and animation.

    Local coordinates are relative to the pivot point, with the y axis pointing
    up and the axes rotated together with the sprite.  Images are any objects
    with ``width`` and ``height`` attributes.
    """

    def __init__(
        self,
        x: Union[float, Vector] = 0.0,
        y: float = 0.0,
        width: Optional[float] = None,
        height: Optional[float] = None,
        image: Any = None,
        time: int = 0,
    ) -> None:
        if isinstance(x, Vector):
            self.position = x
        else:
            self.position = Vector(float(x), float(y))
        w = 0.0 if width is None else float(width)
        h = 0.0 if height is None else float(height)
        self._pt1 = Vector(-w / 2, -h / 2)
        self._pt2 = Vector(w / 2, h / 2)
        self.time = time
        self.state = 0
        self.health = 0.0
        self._direction = Vector(0.0, 1.0)
        self.speed = 0.0
        self.mass = 0.0
        self._rot = 0.0
        self._sin = 0.0
        self._cos = 1.0
        self._omega = 0.0
        self.valid = False
        self.deleted = False
        self.time_death = 0
        self.properties = PropertyStore()
        self.image: Any = None
        self._frames: list[Any] = []
        self._cur_frame = 0
        self._frame_period = 100
        self._frame_time: Optional[int] = None
        self._frame_change_size = True
        self._anim_name: Optional[str] = None
        if image is not None:
            self.set_image(image, change_size=width is None and height is None)

    # Cloning

    def clone(self, position: Optional[Point] = None) -> Sprite:
        """Return an independent copy; its pivot is reset to the centre."""
        other = copy.copy(self)
        other.properties = self.properties.copy()
        other._frames = list(self._frames)
        half = self.size / 2
        other._pt1 = -half
        other._pt2 = half
        other.valid = False
        if position is not None:
            other.position = _vec(position)
        return other

    # Position

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position = Vector(float(value), self.position.y)

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position = Vector(self.position.x, float(value))

    def move(self, dx: Union[float, Vector], dy: Optional[float] = None) -> None:
        self.position = self.position + _vec(dx, dy)

    # Global sides (rotation ignored)

    @property
    def bottom_left(self) -> Vector:
        return self.position + self._pt1

    @bottom_left.setter
    def bottom_left(self, v: Point) -> None:
        self._pt1 = _vec(v) - self.position

    @property
    def top_right(self) -> Vector:
        return self.position + self._pt2

    @top_right.setter
    def top_right(self, v: Point) -> None:
        self._pt2 = _vec(v) - self.position

    @property
    def left(self) -> float:
        return self.x + self._pt1.x

    @left.setter
    def left(self, value: float) -> None:
        self.left_local = value - self.x

    @property
    def bottom(self) -> float:
        return self.y + self._pt1.y

    @bottom.setter
    def bottom(self, value: float) -> None:
        self.bottom_local = value - self.y

    @property
    def right(self) -> float:
        return self.x + self._pt2.x

    @right.setter
    def right(self, value: float) -> None:
        self.right_local = value - self.x

    @property
    def top(self) -> float:
        return self.y + self._pt2.y

    @top.setter
    def top(self, value: float) -> None:
        self.top_local = value - self.y

    # Local sides (relative to the pivot)

    @property
    def bottom_left_local(self) -> Vector:
        return self._pt1

    @bottom_left_local.setter
    def bottom_left_local(self, v: Point) -> None:
        self._pt1 = _vec(v)

    @property
    def top_right_local(self) -> Vector:
        return self._pt2

    @top_right_local.setter
    def top_right_local(self, v: Point) -> None:
        self._pt2 = _vec(v)

    @property
    def left_local(self) -> float:
        return self._pt1.x

    @left_local.setter
    def left_local(self, value: float) -> None:
        self._pt1 = Vector(float(value), self._pt1.y)

    @property
    def bottom_local(self) -> float:
        return self._pt1.y

    @bottom_local.setter
    def bottom_local(self, value: float) -> None:
        self._pt1 = Vector(self._pt1.x, float(value))

    @property
    def right_local(self) -> float:
        return self._pt2.x

    @right_local.setter
    def right_local(self, value: float) -> None:
        self._pt2 = Vector(float(value), self._pt2.y)

    @property
    def top_local(self) -> float:
        return self._pt2.y

    @top_local.setter
    def top_local(self, value: float) -> None:
        self._pt2 = Vector(self._pt2.x, float(value))

    # Size

    @property
    def size(self) -> Vector:
        return self._pt2 - self._pt1

    @property
    def width(self) -> float:
        return self._pt2.x - self._pt1.x

    @property
    def height(self) -> float:
        return self._pt2.y - self._pt1.y

    def set_size(self, width: Union[float, Vector], height: Optional[float] = None) -> None:
        """Resize the sprite, keeping the pivot at the same relative place."""
        v = _vec(width, height)
        pivot = self.pivot_rel
        self._pt1 = -v * pivot
        self._pt2 = v * (Vector(1.0, 1.0) - pivot)

    # Centre

    @property
    def center_local(self) -> Vector:
        return (self._pt1 + self._pt2) / 2

    @property
    def center(self) -> Vector:
        return self.local_to_global(self.center_local)

    # Coordinate conversion

    def global_to_local(self, point: Point, use_rotation: bool = True) -> Vector:
        """Convert a global point to local coordinates (truncated when rotated)."""
        p = _vec(point)
        x = p.x - self.x
        y = p.y - self.y
        if not use_rotation or self.rotation == 0:
            return Vector(x, y)
        return Vector(
            float(int(x * self._cos + y * self._sin)),
            float(int(-x * self._sin + y * self._cos)),
        )

    def local_to_global(self, point: Point, use_rotation: bool = True) -> Vector:
        """Convert a local point to global coordinates."""
        p = _vec(point)
        if not use_rotation or self.rotation == 0:
            return p + self.position
        return Vector(
            p.x * self._cos - p.y * self._sin + self.x,
            p.x * self._sin + p.y * self._cos + self.y,
        )

    # Rectangles

    def client_rect(self) -> Rectangle:
        """Rectangle at (0, 0) with the size of the sprite."""
        return Rectangle(0, 0, int(self.width), int(self.height))

    def bounding_rect(self) -> Rectangle:
        """Smallest integer rectangle covering the rotated sprite."""
        corners = [
            self.local_to_global(Vector(cx, cy))
            for cx in (self._pt1.x, self._pt2.x)
            for cy in (self._pt1.y, self._pt2.y)
        ]
        left = math.floor(min(c.x for c in corners))
        bottom = math.floor(min(c.y for c in corners))
        right = math.floor(max(c.x for c in corners))
        top = math.floor(max(c.y for c in corners))
        return Rectangle(left, bottom, right - left, top - bottom)

    def no_rot_bounding_rect(self) -> Rectangle:
        """Bounding rectangle ignoring rotation."""
        return Rectangle(int(self.left), int(self.bottom), int(self.width), int(self.height))

    # Pivot

    def set_pivot(self, point: Point) -> None:
        """Move the pivot to a global point without moving the sprite."""
        self.set_pivot_local(self.global_to_local(point))

    def set_pivot_local(self, point: Point) -> None:
        """Shift the pivot by a local offset without moving the sprite."""
        v = _vec(point)
        self._pt1 = self._pt1 - v
        self._pt2 = self._pt2 - v
        self.position = self.local_to_global(v)

    @property
    def pivot_from_center(self) -> Vector:
        return -self.center_local

    def set_pivot_from_center(self, offset: Point) -> None:
        self.set_pivot_local(self.center_local + _vec(offset))

    @property
    def pivot_rel(self) -> Vector:
        """Pivot relative to the area: bottom-left (0, 0), top-right (1, 1)."""
        if self._pt2.x == self._pt1.x:
            x = 0.5
        else:
            x = -self._pt1.x / (self._pt2.x - self._pt1.x)
        if self._pt2.y == self._pt1.y:
            y = 0.5
        else:
            y = -self._pt1.y / (self._pt2.y - self._pt1.y)
        return Vector(x, y)

    def set_pivot_rel(self, rel: Point) -> None:
        self.set_pivot_local(self._pt1 + _vec(rel) * (self._pt2 - self._pt1))

    # Images and animation

    def clear_image(self) -> None:
        """Remove the current image and any animation."""
        self._frames = []
        self.image = None

    def set_image(self, image: Any, change_size: bool = True) -> None:
        """Show an image object, or the image stored under an alias name."""
        if isinstance(image, str):
            name = image
            image = self.properties.get(name)
            if image is None:
                raise KeyError(name)
        self.clear_image()
        self.image = image
        if change_size:
            self.set_size(image.width, image.height)

    def _start_animation(
        self, name: str, fps: int, index_start: int, num_frames: int, change_size: bool
    ) -> int:
        if fps <= 0:
            raise ValueError(f"frames per second must be positive: {fps}")
        self.clear_image()
        self._anim_name = name
        available = self.properties.index_count(name) - index_start
        count = min(num_frames, available) if num_frames > 0 else available
        self._frames = [
            self.properties.get_indexed(name, i + index_start) for i in range(max(count, 0))
        ]
        self._cur_frame = 0
        self._frame_period = 1000 // fps
        self._frame_time = None
        self._frame_change_size = change_size
        return count

    def set_animation(
        self, name: str, fps: int = 10, index_start: int = 0, num_frames: int = -1
    ) -> None:
        """Play the images stored at ``name``, resizing to each frame."""
        if self._start_animation(name, fps, index_start, num_frames, True) <= 0:
            self._frames = [_MISSING_IMAGE]

    def set_animation_keep_size(
        self, name: str, fps: int = 10, index_start: int = 0, num_frames: int = -1
    ) -> None:
        """Play the images stored at ``name`` without changing the size."""
        self._start_animation(name, fps, index_start, num_frames, False)

    def is_animation_playing(self, name: Optional[str] = None) -> bool:
        """True if any animation, or the one called ``name``, is playing."""
        if not self._frames:
            return False
        return name is None or name == self._anim_name

    @property
    def current_animation(self) -> Optional[str]:
        return self._anim_name if self.is_animation_playing() else None

    @property
    def current_animation_frame(self) -> int:
        return self._cur_frame if self.is_animation_playing() else -1

    # Hit tests

    def hit_test_point(self, point: Point) -> bool:
        p = self.global_to_local(point)
        return (
            self.left_local <= p.x <= self.right_local
            and self.bottom_local <= p.y <= self.top_local
        )

    def hit_test_circle(self, point: Point, radius: float) -> bool:
        p = self.global_to_local(point)
        return (
            self.left_local - radius <= p.x <= self.right_local + radius
            and self.bottom_local - radius <= p.y <= self.top_local + radius
        )

    def hit_test_rect(self, rect: Rectangle) -> bool:
        return self.bounding_rect().intersects(rect)

    def _covers_extent_of(self, other: Sprite) -> bool:
        local = [
            self.global_to_local(other.local_to_global(Vector(cx, cy)))
            for cx in (other.left_local, other.right_local)
            for cy in (other.bottom_local, other.top_local)
        ]
        xs = [p.x for p in local]
        ys = [p.y for p in local]
        return not (
            max(xs) < self.left_local
            or min(xs) > self.right_local
            or max(ys) < self.bottom_local
            or min(ys) > self.top_local
        )

    def hit_test_sprite(self, other: Sprite) -> bool:
        """Collision of the two rotated bounding boxes."""
        return self._covers_extent_of(other) and other._covers_extent_of(self)

    # Deleting and dying

    def delete(self) -> None:
        self.deleted = True

    def undelete(self) -> None:
        self.deleted = False

    def die(self, time: int) -> None:
        """Schedule deletion ``time`` milliseconds from the sprite's time."""
        self.time_death = self.time + time

    def undie(self) -> None:
        self.time_death = 0

    @property
    def is_dying(self) -> bool:
        return self.time_death != 0

    def time_to_die(self) -> int:
        if self.is_dying:
            return self.time_death - self.time
        return MAX_INT32

    def is_dead(self) -> bool:
        return self.is_dying and self.time_to_die() <= 0

    # Velocity and direction

    @property
    def velocity(self) -> Vector:
        return self._direction * self.speed

    def set_velocity(self, vx: Union[float, Vector], vy: Optional[float] = None) -> None:
        v = _vec(vx, vy)
        self._direction = v.normalized()
        self.speed = v.length()

    @property
    def x_velocity(self) -> float:
        return self.velocity.x

    @x_velocity.setter
    def x_velocity(self, vx: float) -> None:
        self.set_velocity(vx, self.y_velocity)

    @property
    def y_velocity(self) -> float:
        return self.velocity.y

    @y_velocity.setter
    def y_velocity(self, vy: float) -> None:
        self.set_velocity(self.x_velocity, vy)

    @property
    def normalized_velocity(self) -> Vector:
        return self._direction

    @normalized_velocity.setter
    def normalized_velocity(self, v: Point) -> None:
        self._direction = _vec(v).normalized()

    @property
    def direction(self) -> float:
        """Direction of motion in degrees; 0 points up."""
        return math.degrees(math.atan2(self._direction.x, self._direction.y))

    def set_direction(self, angle: float) -> None:
        rad = math.radians(angle)
        self._direction = Vector(math.sin(rad), math.cos(rad))

    def set_direction_vector(self, dx: Union[float, Vector], dy: Optional[float] = None) -> None:
        v = _vec(dx, dy)
        self.set_direction(math.degrees(math.atan2(v.x, v.y)))

    def proceed(self, pixels: float) -> None:
        """Move along the current direction by ``pixels``."""
        self.move(self._direction * pixels)

    def proceed_velocity(self, msecs: float) -> None:
        self.proceed(self.speed * msecs / 1000)

    # Dynamics

    def accelerate(self, ax: Union[float, Vector], ay: Optional[float] = None) -> None:
        self.set_velocity(self.velocity + _vec(ax, ay))

    def apply_force(self, fx: Union[float, Vector], fy: Optional[float] = None) -> None:
        """Accelerate by force divided by mass; massless sprites are unaffected."""
        if self.mass > 0:
            self.accelerate(_vec(fx, fy) / self.mass)

    # Rotation

    @property
    def rotation(self) -> float:
        """Rotation in degrees."""
        return math.degrees(self._rot)

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        rad = math.radians(degrees)
        if rad == self._rot:
            return
        self._rot = rad
        self._sin = math.sin(-rad)
        self._cos = math.cos(-rad)

    def rotate(self, degrees: float) -> None:
        self.rotation = self.rotation + degrees

    @property
    def omega(self) -> float:
        """Rotational speed in degrees per second."""
        return math.degrees(self._omega)

    @omega.setter
    def omega(self, degrees: float) -> None:
        self._omega = math.radians(degrees)

    def proceed_omega(self, msecs: float) -> None:
        self.rotate(math.degrees(self._omega * msecs / 1000))

    # Update

    def update(self, game_time: int) -> None:
        """Advance the sprite to ``game_time``; call once per frame."""
        dt = game_time - self.time
        self.time = game_time
        if dt < 0:
            dt = 0
        if self.is_dead():
            self.delete()
        if not self.deleted:
            self.on_update(game_time, dt)

    def on_update(self, time: int, delta_time: int) -> None:
        """Move, rotate and advance the animation; override for other behaviour."""
        self.proceed_velocity(delta_time)
        self.proceed_omega(delta_time)
        if self._frames:
            if self._frame_time is None:
                self._frame_time = time
            elapsed = time - self._frame_time
            self._cur_frame = (elapsed // self._frame_period) % len(self._frames)
            self.image = self._frames[self._cur_frame]
            if self._frame_change_size:
                self.set_size(self.image.width, self.image.height)