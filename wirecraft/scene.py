"""Camera, player and ground-collider state for the wireframe engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from wirecraft.geometry import rotate_x, rotate_y, yaw_forward, yaw_right
from wirecraft.input import InputKey, InputState, MouseButton
from wirecraft.math3d import Vec3, normalize

_EPSILON = 0.0001
_MAX_DT = 0.05
_MOUSE_DELTA_LIMIT = 40
_FREECAM_PITCH_LIMIT = 1.55
_FOLLOW_PITCH_MAX = 1.2
_FOLLOW_PITCH_MIN = -0.7
_UP = Vec3(0.0, 1.0, 0.0)


def _is_zero(x: float, y: float, z: float) -> bool:
    return abs(x) < _EPSILON and abs(y) < _EPSILON and abs(z) < _EPSILON


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class CameraState:
    """Position, orientation and mouse-look bookkeeping of the view camera."""

    x: float = 0.0
    y: float = 1.0
    z: float = -5.0
    yaw: float = 0.0
    pitch: float = 0.0
    enabled: bool = True
    mouse_locked: bool = False
    last_mouse_x: int = 0
    last_mouse_y: int = 0

    @property
    def position(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @position.setter
    def position(self, value: Vec3) -> None:
        self.x, self.y, self.z = value


@dataclass
class PlayerState:
    """The controllable player ball."""

    active: bool = False
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    normal: Vec3 = _UP
    velocity: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    radius: float = 0.45
    yaw: float = 0.0
    move_speed: float = 4.0
    gravity: float = 16.0
    ground_y: float = 0.0
    grounded: bool = False
    color: tuple[int, int, int] = (255, 220, 120)


@dataclass(frozen=True)
class PlayerInfo:
    """A read-only snapshot of the player."""

    active: bool = False
    position: Vec3 = Vec3(0.0, 0.0, 0.0)
    normal: Vec3 = _UP
    velocity: Vec3 = Vec3(0.0, 0.0, 0.0)
    radius: float = 0.0
    yaw: float = 0.0
    move_speed: float = 0.0
    grounded: bool = False


@dataclass
class SpawnPoint:
    """The most recent place a player was created."""

    has_spawn: bool = False
    position: Vec3 = Vec3(0.0, 0.0, 0.0)
    normal: Vec3 = _UP


@dataclass
class FollowCamera:
    """Settings of the third-person camera orbiting the player."""

    enabled: bool = False
    distance: float = 6.0
    height: float = 2.5
    yaw_offset: float = 0.0
    pitch: float = 0.35


@dataclass(frozen=True)
class GroundBox:
    """An axis-aligned box whose top face is walkable."""

    center: Vec3
    half_size: Vec3

    @property
    def top(self) -> float:
        return self.center.y + self.half_size.y

    def covers(self, x: float, z: float) -> bool:
        return (
            self.center.x - self.half_size.x <= x <= self.center.x + self.half_size.x
            and self.center.z - self.half_size.z <= z <= self.center.z + self.half_size.z
        )


@dataclass
class Scene:
    """All simulation state of the engine, independent of any window."""

    cam: CameraState = field(default_factory=CameraState)
    player: PlayerState = field(default_factory=PlayerState)
    last_spawn: SpawnPoint = field(default_factory=SpawnPoint)
    follow: FollowCamera = field(default_factory=FollowCamera)
    camlock_player_movement: bool = False
    ground_boxes: list[GroundBox] = field(default_factory=list)

    @property
    def following(self) -> bool:
        """True when the follow camera is driving the view."""
        return self.follow.enabled and self.player.active

    def to_view(self, world: Vec3) -> Vec3:
        """Transform a world-space point into camera space."""
        p = world - self.cam.position
        p = rotate_y(p, -self.cam.yaw)
        return rotate_x(p, -self.cam.pitch)

    def support_height(self, x: float, z: float) -> float:
        """Highest platform top under (x, z); the world floor is at 0."""
        return max(
            (box.top for box in self.ground_boxes if box.covers(x, z)),
            default=0.0,
        ) if any(box.covers(x, z) for box in self.ground_boxes) else 0.0 if not self.ground_boxes else max(
            [0.0] + [box.top for box in self.ground_boxes if box.covers(x, z)]
        )

    def set_freecam_enabled(self, enabled: bool, mouse_pos: tuple[int, int] | None = None) -> None:
        """Switch the free camera on or off and reset mouse-look tracking."""
        self.cam.enabled = enabled
        self.cam.mouse_locked = False
        if mouse_pos is not None:
            self.cam.last_mouse_x, self.cam.last_mouse_y = mouse_pos

    def update_follow_camera(self) -> None:
        """Place the camera behind the player, honouring the orbit offset."""
        if not self.following:
            return
        player = self.player
        orbit_yaw = player.yaw + self.follow.yaw_offset
        forward = yaw_forward(orbit_yaw)
        target = player.position + normalize(player.normal) * (player.radius * 0.75)
        self.cam.position = (
            target - forward * self.follow.distance + Vec3(0.0, self.follow.height, 0.0)
        )
        self.cam.yaw = orbit_yaw
        self.cam.pitch = self.follow.pitch

    def _settle(self, reset_vertical_velocity: bool) -> None:
        player = self.player
        min_y = self.support_height(player.position.x, player.position.z) + player.radius
        if player.position.y <= min_y:
            player.position = Vec3(player.position.x, min_y, player.position.z)
            if reset_vertical_velocity:
                player.velocity = Vec3(player.velocity.x, 0.0, player.velocity.z)
            player.grounded = True
        else:
            player.grounded = False

    def create_player(self, x: float, y: float, z: float, nx: float, ny: float, nz: float) -> None:
        """Create the player at a point; a zero normal means world up."""
        player = self.player
        player.active = True
        player.position = Vec3(x, y, z)
        player.velocity = Vec3(0.0, 0.0, 0.0)
        player.yaw = 0.0
        player.normal = _UP if _is_zero(nx, ny, nz) else normalize(Vec3(nx, ny, nz))

        self.last_spawn = SpawnPoint(True, Vec3(x, y, z), player.normal)

        self._settle(reset_vertical_velocity=False)
        self.update_follow_camera()

    def spawn_player(self, *args: float) -> None:
        """Create the player and enable the follow camera.

        With no arguments the last spawn point is reused (nothing happens if
        there is none); otherwise pass x, y, z, nx, ny, nz.
        """
        if not args:
            spawn = self.last_spawn
            if not spawn.has_spawn:
                return
            args = (*spawn.position, *spawn.normal)
        if len(args) != 6:
            raise TypeError(f"spawn_player() takes 0 or 6 coordinates, got {len(args)}")
        self.create_player(*args)
        self.set_follow_camera_enabled(True)

    def add_player(self, x: float, y: float, z: float, nx: float, ny: float, nz: float) -> None:
        """Alias of create_player."""
        self.create_player(x, y, z, nx, ny, nz)

    def remove_player(self, keep_last_spawn: bool = True) -> None:
        """Deactivate the player and hand the view back to the free camera."""
        self.go_back_to_freecam_from_player()
        if not keep_last_spawn:
            self.last_spawn.has_spawn = False
        self.player.active = False
        self.player.velocity = Vec3(0.0, 0.0, 0.0)
        self.player.grounded = False

    def set_player_position(self, x: float, y: float, z: float) -> None:
        """Teleport the player, landing it on any surface beneath."""
        if not self.player.active:
            return
        self.player.position = Vec3(x, y, z)
        self._settle(reset_vertical_velocity=True)
        self.update_follow_camera()

    def go_back_to_freecam_from_player(self) -> None:
        """Leave follow mode, keeping the camera where the follow view put it."""
        player = self.player
        if player.active:
            orbit_yaw = player.yaw + self.follow.yaw_offset
            forward = yaw_forward(orbit_yaw)
            self.cam.position = (
                player.position - forward * self.follow.distance
                + Vec3(0.0, self.follow.height, 0.0)
            )
            self.cam.yaw = orbit_yaw
            self.cam.pitch = self.follow.pitch
        self.follow.enabled = False
        self.set_freecam_enabled(True)

    def move_player(self, dx: float, dy: float, dz: float) -> None:
        """Move in player space: dx strafes, dz goes forward, dy goes up."""
        player = self.player
        if not player.active:
            return

        follow = self.follow
        movement_yaw = player.yaw + follow.yaw_offset if follow.enabled else player.yaw
        if follow.enabled and (abs(dx) > _EPSILON or abs(dz) > _EPSILON):
            player.yaw = movement_yaw
            follow.yaw_offset = 0.0

        if follow.enabled and movement_yaw != self.cam.yaw:
            self.move_player(self.cam.yaw - movement_yaw, 0.0, 0.0)

        planar = (yaw_right(movement_yaw) * dx + yaw_forward(movement_yaw) * dz) * player.move_speed
        position = player.position
        player.position = Vec3(
            position.x + planar.x,
            position.y + dy * player.move_speed,
            position.z + planar.z,
        )

        if player.grounded:
            min_y = self.support_height(player.position.x, player.position.z) + player.radius
            player.position = Vec3(
                player.position.x, max(player.position.y, min_y), player.position.z
            )

        self.update_follow_camera()

    def rotate_player(self, delta_yaw: float) -> None:
        """Turn the player by ``delta_yaw`` radians."""
        if not self.player.active:
            return
        self.player.yaw += delta_yaw
        self.update_follow_camera()

    def jump_player(self, impulse: float = 6.0) -> None:
        """Give a grounded player an upward velocity."""
        player = self.player
        if not player.active or not player.grounded:
            return
        player.velocity = Vec3(player.velocity.x, impulse, player.velocity.z)
        player.grounded = False

    def update_player(self, dt: float) -> None:
        """Apply gravity for ``dt`` seconds (capped) and land on surfaces."""
        player = self.player
        if not player.active:
            return
        dt = min(dt, _MAX_DT)
        vy = player.velocity.y - player.gravity * dt
        player.velocity = Vec3(player.velocity.x, vy, player.velocity.z)
        player.position = Vec3(player.position.x, player.position.y + vy * dt, player.position.z)
        self._settle(reset_vertical_velocity=True)
        self.update_follow_camera()

    def set_player_rotation(self, yaw: float) -> None:
        """Set the player's absolute yaw."""
        if not self.player.active:
            return
        self.player.yaw = yaw
        self.update_follow_camera()

    def player_info(self) -> PlayerInfo:
        """Return a snapshot of the player."""
        p = self.player
        return PlayerInfo(
            p.active, p.position, p.normal, p.velocity, p.radius, p.yaw, p.move_speed, p.grounded
        )

    def set_player_move_speed(self, speed: float) -> None:
        """Set the movement multiplier; negative speeds become zero."""
        self.player.move_speed = max(0.0, speed)

    def set_follow_camera_enabled(self, enabled: bool) -> None:
        """Turn the follow camera on or off."""
        self.follow.enabled = enabled
        if enabled:
            self.update_follow_camera()

    def set_follow_camera_offset(self, distance: float, height: float) -> None:
        """Set how far behind and above the player the follow camera sits."""
        self.follow.distance = distance
        self.follow.height = height
        self.update_follow_camera()

    def set_camlock_player_movement(self, enabled: bool) -> None:
        """When enabled, mouse look turns the player instead of orbiting."""
        self.camlock_player_movement = enabled
        if enabled and self.player.active and self.follow.enabled:
            self.player.yaw += self.follow.yaw_offset
            self.follow.yaw_offset = 0.0
            self.update_follow_camera()

    def clear_ground_colliders(self) -> None:
        """Remove every ground box."""
        self.ground_boxes.clear()

    def add_ground_box(
        self, cx: float, cy: float, cz: float, half_x: float, half_y: float, half_z: float
    ) -> None:
        """Add a walkable box; half sizes are taken as absolute values."""
        self.ground_boxes.append(
            GroundBox(Vec3(cx, cy, cz), Vec3(abs(half_x), abs(half_y), abs(half_z)))
        )

    def _track_mouse(self, state: InputState) -> tuple[int, int]:
        wants_look = state.is_button_pressed(MouseButton.RIGHT_MOUSE_BUTTON)
        if wants_look != self.cam.mouse_locked:
            self.cam.mouse_locked = wants_look
            self.cam.last_mouse_x, self.cam.last_mouse_y = state.mouse_pos
        if not self.cam.mouse_locked:
            return 0, 0
        mx, my = state.mouse_pos
        dx = int(_clamp(mx - self.cam.last_mouse_x, -_MOUSE_DELTA_LIMIT, _MOUSE_DELTA_LIMIT))
        dy = int(_clamp(my - self.cam.last_mouse_y, -_MOUSE_DELTA_LIMIT, _MOUSE_DELTA_LIMIT))
        self.cam.last_mouse_x, self.cam.last_mouse_y = mx, my
        return dx, dy

    def update_freecam(
        self,
        dt: float,
        state: InputState,
        move_speed: float = 60.0,
        mouse_sens: float = 0.01,
    ) -> None:
        """Drive the camera from one frame of input.

        In follow mode the right mouse button orbits the player; otherwise
        it looks around and W/A/S/D, Space and left Shift fly the camera.
        """
        if self.following:
            dx, dy = self._track_mouse(state)
            if self.cam.mouse_locked:
                if self.camlock_player_movement:
                    self.player.yaw -= dx * mouse_sens
                else:
                    self.follow.yaw_offset -= dx * mouse_sens
                self.follow.pitch = _clamp(
                    self.follow.pitch + dy * mouse_sens, _FOLLOW_PITCH_MIN, _FOLLOW_PITCH_MAX
                )
            self.update_follow_camera()
            return

        if not self.cam.enabled:
            return

        dt = min(dt, _MAX_DT)
        dx, dy = self._track_mouse(state)
        cam = self.cam
        if cam.mouse_locked:
            cam.yaw -= dx * mouse_sens
            cam.pitch = _clamp(
                cam.pitch + dy * mouse_sens, -_FREECAM_PITCH_LIMIT, _FREECAM_PITCH_LIMIT
            )

        import math

        cy, sy = math.cos(cam.yaw), math.sin(cam.yaw)
        cp, sp = math.cos(cam.pitch), math.sin(cam.pitch)
        forward = Vec3(-sy * cp, -sp, cy * cp)
        right = Vec3(cy, 0.0, sy)
        v = move_speed * dt

        if state.is_key_pressed(InputKey.W_KEY):
            cam.position = cam.position + forward * v
        if state.is_key_pressed(InputKey.S_KEY):
            cam.position = cam.position - forward * v
        if state.is_key_pressed(InputKey.D_KEY):
            cam.x += right.x * v
            cam.z += right.z * v
        if state.is_key_pressed(InputKey.A_KEY):
            cam.x -= right.x * v
            cam.z -= right.z * v
        if state.is_key_pressed(InputKey.SPACE):
            cam.y += v
        if state.is_key_pressed(InputKey.LEFT_SHIFT):
            cam.y -= v

    def set_to_first_person(self, enabled: bool, lock_mouse: bool) -> bool:
        """Put the camera at the player's eye.

        Returns True when the caller should hide the cursor.
        """
        if not enabled and not self.player.active:
            return False
        if not self.player.active:
            return False
        self.cam.position = self.player.position
        self.cam.yaw = self.player.yaw
        self.cam.pitch = 0.0
        return lock_mouse

    def debug_text(self) -> str:
        """The coordinate overlay text shown in debug mode."""
        mode = "followcam" if self.following else "freecam"
        lines = [
            f"Camera: {mode}",
            f"X: {self.cam.x:.2f}",
            f"Y: {self.cam.y:.2f}",
            f"Z: {self.cam.z:.2f}",
        ]
        player = self.player
        if player.active:
            lines += [
                f"PX: {player.position.x:.2f}",
                f"PY: {player.position.y:.2f}",
                f"PZ: {player.position.z:.2f}",
                f"Yaw: {player.yaw:.2f}",
                f"MoveSpeed: {player.move_speed:.2f}",
                f"Grounded: {'true' if player.grounded else 'false'}",
            ]
        else:
            lines.append("Player: inactive")
        return "\n".join(lines)