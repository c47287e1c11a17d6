"""A pygame window that renders the scene as a wireframe."""

from __future__ import annotations

import os
from typing import Optional

import pygame

from wirecraft.geometry import yaw_forward
from wirecraft.input import (
    InputKey,
    InputState,
    MouseButton,
    to_pygame_button,
    to_pygame_key,
)
from wirecraft.math3d import Vec3, normalize
from wirecraft.scene import Scene
from wirecraft.wireframe import (
    Segment,
    cube_segments,
    grid_segments,
    project_segment,
    sphere_segments,
)

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
CYAN: Color = (0, 255, 255)
GREEN: Color = (0, 255, 0)
GRID_COLOR: Color = (80, 80, 80)

_DEBUG_FONT_PATHS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
)
_DEBUG_FONT_SIZE = 16
_DEBUG_TEXT_ORIGIN = (12, 8)


def _load_debug_font() -> Optional[pygame.font.Font]:
    for path in _DEBUG_FONT_PATHS:
        if not os.path.exists(path):
            continue
        try:
            return pygame.font.Font(path, _DEBUG_FONT_SIZE)
        except (OSError, pygame.error):
            continue
    return None


class Engine:
    """Owns the window, the frame clock and the simulated scene."""

    def __init__(self) -> None:
        self.scene = Scene()
        self.surface: Optional[pygame.Surface] = None
        self.debug_coords_enabled = False
        self.fps_limit = 0
        self._clock = pygame.time.Clock()
        self._debug_font: Optional[pygame.font.Font] = None

    def create_window(
        self, width: int, height: int, title: str, vsync_enabled: bool, fps_limit: int
    ) -> None:
        """Open the window and configure the frame-rate limit."""
        pygame.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        if vsync_enabled:
            self.fps_limit = 60 if fps_limit == 0 else fps_limit
        else:
            self.fps_limit = fps_limit
        print(
            f"[AQWENGINE] Framerate limit: {fps_limit} |vsync is {int(bool(vsync_enabled))}",
            flush=True,
        )
        pygame.mouse.set_visible(True)
        pygame.event.set_grab(False)
        self.scene.set_freecam_enabled(self.scene.cam.enabled, pygame.mouse.get_pos())

    def _require_surface(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("window is not open")
        return self.surface

    def clear_screen(self) -> None:
        """Fill the window with black."""
        self._require_surface().fill(BLACK)

    def update_screen(self) -> None:
        """Draw the player and debug overlay, then present the frame."""
        self._require_surface()
        player = self.scene.player
        if player.active:
            p = player.position
            n = player.normal
            self.draw_a_ball(p.x, p.y, p.z, n.x, n.y, n.z, player.radius, player.color)
            reach = player.radius * 1.8
            head = p + normalize(n) * reach
            facing = p + yaw_forward(player.yaw) * reach
            self.draw_line3d(p, head, CYAN)
            self.draw_line3d(p, facing, GREEN)
        self._draw_debug_overlay()
        pygame.display.flip()

    def poll_events(self) -> None:
        """Drain the event queue, closing the window on a quit request."""
        if self.surface is None:
            return
        quit_requested = any(event.type == pygame.QUIT for event in pygame.event.get())
        if quit_requested:
            self._close()

    def _close(self) -> None:
        pygame.display.quit()
        self.surface = None

    def destroy_window(self) -> None:
        """Close the window."""
        print("[AQWENGINE] Destroying window...", flush=True)
        self._close()

    def is_pressed_key(self, key: InputKey) -> bool:
        """True while ``key`` is held; unbound keys never read as pressed."""
        self._require_surface()
        code = to_pygame_key(key)
        return code is not None and bool(pygame.key.get_pressed()[code])

    def is_pressed_mouse_button(self, button: MouseButton) -> bool:
        """True while ``button`` is held."""
        self._require_surface()
        number = to_pygame_button(button)
        return number is not None and bool(pygame.mouse.get_pressed()[number - 1])

    def is_open(self) -> bool:
        """True until the window has been closed."""
        return self.surface is not None

    def input_state(self) -> InputState:
        """Snapshot the current keyboard, mouse buttons and cursor position."""
        self._require_surface()
        pressed = pygame.key.get_pressed()
        keys = frozenset(
            key
            for key in InputKey
            if (code := to_pygame_key(key)) is not None and pressed[code]
        )
        mouse = pygame.mouse.get_pressed()
        buttons = frozenset(
            button
            for button in MouseButton
            if (number := to_pygame_button(button)) is not None and mouse[number - 1]
        )
        return InputState(keys, buttons, tuple(pygame.mouse.get_pos()))

    def _draw_segments(self, segments: list[Segment], color: Color) -> None:
        surface = self._require_surface()
        width, height = surface.get_size()
        for a, b in segments:
            projected = project_segment(self.scene, a, b, width, height)
            if projected is not None:
                pygame.draw.line(surface, color, projected[0], projected[1])

    def draw_line3d(self, a: Vec3, b: Vec3, color: Color = WHITE) -> None:
        """Draw one world-space line."""
        self._draw_segments([(a, b)], color)

    def draw_cube_wire(
        self, cx: float, cy: float, cz: float, size: float, angle_y: float
    ) -> None:
        """Draw a white wire cube."""
        self._draw_segments(cube_segments(cx, cy, cz, size, angle_y), WHITE)

    def draw_a_ball(
        self,
        x: float,
        y: float,
        z: float,
        nx: float,
        ny: float,
        nz: float,
        radius: float,
        color: Color = WHITE,
    ) -> None:
        """Draw a wire sphere oriented along the normal."""
        self._draw_segments(sphere_segments(x, y, z, nx, ny, nz, radius), color)

    def draw_grid3d(self, size: float, step: float) -> None:
        """Draw the grey floor grid."""
        self._draw_segments(grid_segments(size, step), GRID_COLOR)

    def update_freecam(
        self, dt: float, move_speed: float = 60.0, mouse_sens: float = 0.01
    ) -> None:
        """Feed this frame's input to the camera controller."""
        self.scene.update_freecam(dt, self.input_state(), move_speed, mouse_sens)

    def set_debug_coords_enabled(self, enabled: bool) -> None:
        """Show or hide the coordinate overlay."""
        self.debug_coords_enabled = enabled

    def lock_cursor_to_center(self, enabled: bool) -> None:
        """Hide the cursor while enabled, show it otherwise."""
        pygame.mouse.set_visible(not enabled)

    def tick(self) -> float:
        """Wait for the frame-rate limit and return seconds since the last tick."""
        return self._clock.tick(self.fps_limit) / 1000.0

    def _draw_debug_overlay(self) -> None:
        if not self.debug_coords_enabled:
            return
        if self._debug_font is None:
            self._debug_font = _load_debug_font()
            if self._debug_font is None:
                return
        surface = self._require_surface()
        font = self._debug_font
        x, y = _DEBUG_TEXT_ORIGIN
        for line in self.scene.debug_text().split("\n"):
            outline = font.render(line, True, BLACK)
            for ox, oy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                surface.blit(outline, (x + ox, y + oy))
            surface.blit(font.render(line, True, WHITE), (x, y))
            y += font.get_linesize()