"""Demo scene: a player ball on a floor and a raised platform."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from wirecraft.engine import Engine
from wirecraft.input import InputKey

SHOW_DEBUG_COORDS = True
PLAYER_BASE_SPEED = 4.0
AIR_SPEED_FACTOR = 0.8
TURN_RATE = 1.8


def build_demo(engine: Engine) -> None:
    """Set up the colliders, player and follow camera of the demo."""
    engine.set_debug_coords_enabled(SHOW_DEBUG_COORDS)
    scene = engine.scene
    scene.clear_ground_colliders()
    scene.add_ground_box(0.0, -0.5, 0.0, 30.0, 0.5, 30.0)
    scene.add_ground_box(6.0, 1.0, 6.0, 3.0, 0.35, 3.0)

    scene.create_player(2.0, 0.45, 4.0, 0.0, 1.0, 0.0)
    scene.set_player_rotation(0.35)
    scene.set_player_move_speed(PLAYER_BASE_SPEED)
    scene.set_follow_camera_offset(7.0, 3.0)
    scene.set_camlock_player_movement(True)
    scene.set_follow_camera_enabled(True)


def handle_input(engine: Engine, dt: float) -> None:
    """Apply one frame of controls and physics to the demo scene."""
    scene = engine.scene
    step = dt
    turn = TURN_RATE * dt

    engine.update_freecam(dt)
    state = engine.input_state()

    actions = (
        (InputKey.W_KEY, lambda: scene.move_player(0.0, 0.0, step)),
        (InputKey.S_KEY, lambda: scene.move_player(0.0, 0.0, -step)),
        (InputKey.A_KEY, lambda: scene.move_player(-step, 0.0, 0.0)),
        (InputKey.D_KEY, lambda: scene.move_player(step, 0.0, 0.0)),
        (InputKey.Q_KEY, lambda: scene.rotate_player(-turn)),
        (InputKey.E_KEY, lambda: scene.rotate_player(turn)),
        (InputKey.R_KEY, lambda: scene.set_player_position(2.0, 3.0, 4.0)),
        (InputKey.F_KEY, scene.go_back_to_freecam_from_player),
        (InputKey.G_KEY, scene.remove_player),
        (InputKey.H_KEY, scene.spawn_player),
        (InputKey.SPACE, scene.jump_player),
    )
    for key, action in actions:
        if state.is_key_pressed(key):
            action()

    # Slightly less control while airborne.
    if scene.player.grounded:
        scene.set_player_move_speed(PLAYER_BASE_SPEED)
    else:
        scene.set_player_move_speed(PLAYER_BASE_SPEED * AIR_SPEED_FACTOR)

    scene.update_player(dt)
    if scene.set_to_first_person(True, True):
        engine.lock_cursor_to_center(True)


def _draw_world(engine: Engine) -> None:
    engine.clear_screen()
    engine.draw_grid3d(30.0, 1.0)
    engine.draw_cube_wire(0.0, 1.0, 0.0, 1.0, 0.0)
    engine.draw_cube_wire(6.0, 1.0, 6.0, 3.0, 0.0)
    engine.draw_a_ball(0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0)
    engine.update_screen()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo until the window is closed."""
    parser = argparse.ArgumentParser(prog="wirecraft", description="Wireframe 3D demo.")
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="stop after this many frames (0 runs until the window is closed)",
    )
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    engine = Engine()
    engine.create_window(800, 600, "aqwengine wire 3d", True, 60)
    try:
        build_demo(engine)
        frames = 0
        while engine.is_open():
            dt = engine.tick()
            engine.poll_events()
            if not engine.is_open():
                break
            handle_input(engine, dt)
            _draw_world(engine)
            frames += 1
            if args.frames and frames >= args.frames:
                break
    finally:
        if engine.is_open():
            engine.destroy_window()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())