"""Game state and rules: falling 3x3x3 cubes on a 9x9 plane."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from .transform import look_at, perspective, rotate, scale, translate
from .vecmath import Mat4, Vec3

CUBE3_SIZE = 27
PLANE9X9_SIZE = 81
ENTITY_SIZE = 256

YELLOW = Vec3(1.0, 1.0, 0.0)
RED = Vec3(1.0, 0.0, 0.0)


class ViewOrientation(IntEnum):
    FRONT = 0
    LEFT = 1
    BACK = 2
    RIGHT = 3


class EntityType(Enum):
    PLANE9X9 = 0
    CUBE3 = 1


@dataclass
class Button:
    """Edge-tracking state of one key."""

    held: bool = False
    first: bool = False
    release: bool = False
    press: bool = False

    def update(self, pressed: bool) -> None:
        if pressed:
            self.held = self.press
            self.first = not self.press
            self.press = True
            self.release = False
        else:
            self.held = False
            self.first = False
            self.press = False
            self.release = True


@dataclass
class Controls:
    w: Button = field(default_factory=Button)
    a: Button = field(default_factory=Button)
    s: Button = field(default_factory=Button)
    d: Button = field(default_factory=Button)
    h: Button = field(default_factory=Button)
    k: Button = field(default_factory=Button)
    f11: Button = field(default_factory=Button)

    def buttons(self) -> Tuple[Button, ...]:
        return (self.w, self.a, self.s, self.d, self.h, self.k, self.f11)


@dataclass
class Window:
    width: int = 800
    height: int = 600
    tlimit: float = 1.0 / 60.0
    is_fullscreen: bool = False
    wx: int = 0
    wy: int = 0
    ww: int = 0
    wh: int = 0


@dataclass
class Text:
    content: str
    color: Vec3
    position: Tuple[float, float]
    scale: float


@dataclass
class Frame:
    """Everything the renderer needs for one frame."""

    colors: List[Vec3]
    models: List[Mat4]
    texts: List[Text]
    view: Mat4
    projection: Mat4
    eye: Vec3
    light: Vec3


@dataclass(frozen=True)
class BoundingBox:
    front: float
    back: float
    left: float
    right: float
    top: float
    bottom: float

    @staticmethod
    def from_upper(upper: Vec3, size: Vec3) -> "BoundingBox":
        return BoundingBox(
            front=upper.z,
            back=upper.z - size.z,
            left=upper.x - size.x,
            right=upper.x,
            top=upper.y,
            bottom=upper.y - size.y,
        )


@dataclass
class Entity:
    kind: EntityType
    color: Vec3
    extent: Vec3
    center: Vec3
    vertices: List[Vec3] = field(default_factory=list)
    boundaries: List[Vec3] = field(default_factory=list)
    transforms: List[Mat4] = field(default_factory=list)
    is_alive: bool = True
    is_active: bool = True

    def translate(self, offset: Vec3) -> None:
        self.center = self.center + offset
        self.boundaries = [b + offset for b in self.boundaries]
        self.vertices = [v + offset for v in self.vertices]
        step = translate(offset)
        self.transforms = [t @ step for t in self.transforms]

    def scale(self, factor: Vec3) -> None:
        self.transforms = [
            t @ scale(factor, v) for t, v in zip(self.transforms, self.vertices)
        ]

    def rotate(self, axis: Vec3, angle: float) -> None:
        self.transforms = [
            t @ rotate(axis, angle, v) for t, v in zip(self.transforms, self.vertices)
        ]


def view_orientation(angle: float) -> ViewOrientation:
    return ViewOrientation(math.trunc(angle / 90) % 4)


def _build_entity(kind: EntityType, color: Vec3, extent: Vec3, center: Vec3) -> Entity:
    entity = Entity(kind=kind, color=color, extent=extent, center=center)
    px = py = pz = 0
    if kind is EntityType.CUBE3:
        bx, by, bz = (int(c) for c in 3 * extent)
        count = CUBE3_SIZE
    else:
        bx, by, bz = (int(c) for c in 9 * extent)
        count = PLANE9X9_SIZE
    for i in range(count):
        px = int(px + extent.x) % bx
        if kind is EntityType.CUBE3:
            if i % 3:
                py = int(py + extent.y) % by
            if i % 9:
                pz = int(pz + extent.z) % bz
            offset = Vec3(px, py, pz) - extent
        else:
            if i % 9:
                pz = int(pz + extent.z) % bz
            shifted = Vec3(px, py, pz) - extent * 4
            offset = Vec3(shifted.x, 0.0, shifted.z)
        vertex = center + offset
        entity.vertices.append(vertex)
        entity.boundaries.append(vertex + extent / 2)
        entity.transforms.append(scale(extent, vertex) @ translate(vertex))
    return entity


class Game:
    """The whole game state, advanced one frame at a time by :meth:`update`."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.is_game_active = False
        self.game_speed = 0.0
        self.movement = Vec3()
        self.angle = 0.0
        self.target_angle = 0.0
        self.current_angle = 0.0
        self.rotation_axis = Vec3(0.0, 1.0, 0.0)
        self.frame_counter = 0
        self.target_frame = 0
        self.current_frame = 0
        self.move_char = ""
        self.game_over_text = ""
        self.cube_color = Vec3(0.86, 0.11, 0.31)
        self.plane_color = Vec3(0.334, 0.288, 0.635)
        self.cube_pos = Vec3(0.0, 13.5, 0.0)
        self.plane_pos = Vec3(0.0, -0.25, 0.0)
        self.cube_scale = Vec3(1.0, 1.0, 1.0)
        self.plane_scale = Vec3(1.0, 0.5, 1.0)
        self.eye = Vec3(0.0, 7.0, 24.0)
        self.light = Vec3(0.0, 7.0, 7.0)
        self.view = look_at(self.eye, Vec3(0.0, 7.0, 0.0), Vec3(0.0, 1.0, 0.0))
        self.projection = Mat4.identity()
        self.texts: List[Text] = []
        self.score = 0
        self.entities: List[Entity] = []
        self.active_index = 0
        self.plane_index = 0
        self.create_entity(EntityType.PLANE9X9)
        self.create_entity(EntityType.CUBE3)
        self.is_init = True

    def create_entity(self, kind: EntityType) -> Entity:
        if kind is EntityType.CUBE3:
            entity = _build_entity(kind, self.cube_color, self.cube_scale, self.cube_pos)
        else:
            entity = _build_entity(kind, self.plane_color, self.plane_scale, self.plane_pos)
        index: Optional[int] = next(
            (i for i, e in enumerate(self.entities) if not e.is_alive), None
        )
        if index is None:
            if len(self.entities) >= ENTITY_SIZE:
                raise RuntimeError("no free entity slot")
            index = len(self.entities)
            self.entities.append(entity)
        else:
            self.entities[index] = entity
        if kind is EntityType.CUBE3:
            self.active_index = index
        else:
            self.plane_index = index
        return entity

    def active_entity(self) -> Entity:
        return self.entities[self.active_index]

    def inactive_entities(self) -> List[Entity]:
        return [
            e for i, e in enumerate(self.entities)
            if e.is_alive and i != self.active_index
        ]

    def _say(self, content: str, color: Vec3, position: Tuple[float, float], size: float) -> None:
        self.texts.append(Text(content, color, position, size))

    def process_input(self, controls: Controls, window: Window) -> None:
        flimit = 1.0 / window.tlimit
        pause = int(flimit / 3)

        if controls.h.first:
            self.target_angle += 90.0
            self.move_char = "H"
            self.target_frame = pause
        if controls.k.first:
            self.target_angle -= 90.0
            self.move_char = "H"
            self.target_frame = pause

        self.angle = 0.0
        if self.target_angle > self.current_angle:
            self.angle = 5.0
            self.current_angle += 5.0
        elif self.target_angle < self.current_angle:
            self.angle = -5.0
            self.current_angle -= 5.0

        side = view_orientation(self.target_angle)
        lateral, label = {
            ViewOrientation.FRONT: (Vec3(1.0, 0.0, 0.0), "Front"),
            ViewOrientation.BACK: (Vec3(-1.0, 0.0, 0.0), "Back"),
            ViewOrientation.LEFT: (Vec3(0.0, 0.0, 1.0), "Left"),
            ViewOrientation.RIGHT: (Vec3(0.0, 0.0, -1.0), "Right"),
        }[side]
        self._say(label, YELLOW, (0.0, float(window.height)), 1.0)

        self.movement = Vec3()

        if controls.s.first:
            if not self.is_game_active and self.game_over_text:
                self.is_init = False
            value = self.game_speed or 0.5
            multiplier = 2.0 if self.game_speed < 4 else 1.0
            self.game_speed = value * multiplier
            self.is_game_active = True
            self.target_frame = pause
            self.move_char = "S"

        if self.is_game_active:
            if controls.w.first:
                self.game_speed *= 0.5 if self.game_speed > 1 else 1.0
                self.target_frame = pause
                self.move_char = "W"
            if controls.a.first:
                self.movement = -lateral
                self.target_frame = pause
                self.move_char = "A"
            if controls.d.first:
                self.movement = lateral
                self.target_frame = pause
                self.move_char = "D"
            counter = self.frame_counter
            self.frame_counter += 1
            if counter % int(flimit / self.game_speed) == 0:
                self.movement = Vec3(self.movement.x, -1.0, self.movement.z)

        if self.target_frame:
            current = self.current_frame
            self.current_frame += 1
            if current != self.target_frame:
                self._say(self.move_char, RED, (0.0, float(window.height) - 100), 0.75)
            else:
                self.current_frame = 0
                self.target_frame = 0
                self.move_char = ""

    def check_collision(self) -> None:
        active = self.active_entity()
        for entity in self.inactive_entities():
            for boundary in entity.boundaries:
                entity_box = BoundingBox.from_upper(boundary, entity.extent)
                for vertex, active_boundary in zip(active.vertices, active.boundaries):
                    box = BoundingBox.from_upper(active_boundary + self.movement, active.extent)
                    ac, ec = active.center, entity.center
                    xhit = box.right > entity_box.left if ac.x < ec.x else box.left < entity_box.right
                    yhit = box.top > entity_box.bottom if ac.y < ec.y else box.bottom < entity_box.top
                    zhit = box.front > entity_box.back if ac.z < ec.z else box.back < entity_box.front
                    yalign = box.top == entity_box.bottom if ac.y < ec.y else box.bottom == entity_box.top
                    active_next = vertex + self.movement

                    if ac.y == self.cube_pos.y and yalign and xhit and zhit:
                        self.is_game_active = False
                        self.game_over_text = "Game Over"

                    if xhit and yhit and zhit:
                        my = self.movement.y
                        if my and not self.movement.x and not self.movement.z:
                            active.is_active = False
                            my = 0.0
                        self.movement = Vec3(0.0, my, 0.0)

                    if entity.kind is EntityType.PLANE9X9:
                        if (abs(active_next.x) > ec.x + 4) or (abs(active_next.z) > ec.z + 4):
                            self.movement = Vec3(0.0, self.movement.y, 0.0)

    def clear_full_layers(self) -> None:
        """Remove the lowest layer holding nine resting cubes and drop those above."""
        h = self.plane_pos.y + 1.75
        while h <= self.cube_pos.y:
            inactive = self.inactive_entities()
            if sum(1 for e in inactive if e.center.y == h) == 9:
                for entity in inactive:
                    if entity.center.y == h:
                        entity.is_alive = False
                    if entity.center.y > h:
                        entity.translate(Vec3(0.0, -3.0, 0.0))
                self.score += 9 * CUBE3_SIZE
                break
            h += 3

    def update(self, controls: Controls, window: Window) -> Frame:
        if not self.is_init:
            self.reset()
        self.projection = perspective(45.0, window.width, window.height, 0.1, 100.0)

        self._say(f"Score: {self.score}", YELLOW,
                  (float(window.width), float(window.height)), 1.0)
        self._say(self.game_over_text, YELLOW,
                  (window.width / 2 - 150, window.height / 2), 1.5)

        self.process_input(controls, window)
        self.check_collision()

        active = self.active_entity()
        if not active.is_active and self.is_game_active:
            active = self.create_entity(EntityType.CUBE3)

        self.clear_full_layers()
        active.translate(self.movement)

        self.view = self.view @ rotate(self.rotation_axis, self.angle)
        self.light = self.light.transformed(rotate(self.rotation_axis, -self.angle))

        colors: List[Vec3] = []
        models: List[Mat4] = []
        for entity in self.entities:
            if entity.is_alive:
                colors.extend(entity.color for _ in entity.transforms)
                models.extend(entity.transforms)
        texts, self.texts = self.texts, []
        return Frame(colors, models, texts, self.view, self.projection, self.eye, self.light)