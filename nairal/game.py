"""The dodging game: window loop, playing state and game-over screen."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from pathlib import Path
from typing import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from nairal.animation import AnimationSystem  # noqa: E402
from nairal.assets import SoundManager, TextureManager  # noqa: E402
from nairal.collision import CollisionSystem  # noqa: E402
from nairal.components import (  # noqa: E402
    WHITE,
    Collider,
    Color,
    Lifetime,
    Obstacle,
    ObstacleType,
    Physics,
    Player,
    Renderable,
    TextureRect,
    Transform,
    Vec2,
)
from nairal.controls import InputSystem  # noqa: E402
from nairal.entities import Entity  # noqa: E402
from nairal.lifetime import LifetimeSystem  # noqa: E402
from nairal.physics import PhysicsSystem  # noqa: E402
from nairal.render import RenderSystem  # noqa: E402
from nairal.state import State, StateManager  # noqa: E402
from nairal.world import World  # noqa: E402

logger = logging.getLogger(__name__)

WIDTH = 800
HEIGHT = 600
TITLE = "Nairal: Dodge This!"
FRAME_RATE = 60
MAX_FRAME_TIME = 0.1

BLACK: Color = (0, 0, 0, 255)
RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)
BLUE: Color = (0, 0, 255, 255)
YELLOW: Color = (255, 255, 0, 255)

Controls = Callable[[], "tuple[bool, bool, bool]"]


def _held_keys() -> tuple[bool, bool, bool]:
    """Left, right and jump as currently held on the keyboard."""
    if not pygame.display.get_init():
        return False, False, False
    keys = pygame.key.get_pressed()
    return (
        bool(keys[pygame.K_LEFT] or keys[pygame.K_a]),
        bool(keys[pygame.K_RIGHT] or keys[pygame.K_d]),
        bool(keys[pygame.K_UP] or keys[pygame.K_SPACE]),
    )


def _draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: Color,
    position: tuple[int, int],
) -> None:
    x, y = position
    for line in text.split("\n"):
        surface.blit(font.render(line, True, color[:3]), (x, y))
        y += font.get_linesize()


class Game:
    """Owns the world, the assets and the state machine, and runs the loop."""

    def __init__(
        self,
        *,
        asset_dir: str | os.PathLike[str] = "data",
        textures: TextureManager | None = None,
        sounds: SoundManager | None = None,
        rng: random.Random | None = None,
        controls: Controls | None = None,
    ) -> None:
        self.asset_dir = Path(asset_dir)
        self.world = World()
        self.state_manager = StateManager()
        self.textures = textures if textures is not None else TextureManager()
        self.sounds = sounds if sounds is not None else SoundManager()
        self.rng = rng if rng is not None else random.Random()
        self.controls: Controls = controls if controls is not None else _held_keys
        self.window: pygame.Surface | None = None
        self.running = False
        self._fonts: dict[int, pygame.font.Font] = {}

    def asset(self, relative: str) -> str:
        return str(self.asset_dir / relative)

    def font(self, size: int) -> pygame.font.Font:
        """The default font at ``size``, created once."""
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def close(self) -> None:
        """Stop the main loop after the current frame."""
        self.running = False

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self.window = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            self.running = True
            self.state_manager.change_state(PlayingState(self))

            while self.running:
                dt = min(clock.tick(FRAME_RATE) / 1000.0, MAX_FRAME_TIME)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.close()
                    self.state_manager.handle_event(event)
                if not self.running:
                    break

                self.state_manager.update(dt)

                self.window.fill(BLACK)
                self.state_manager.render(self.window)
                pygame.display.flip()
        finally:
            self.sounds.stop_all()
            self.window = None
            pygame.quit()

    def game_over(self) -> None:
        """Queue the game-over screen if a game is being played."""
        current = self.state_manager.current_state
        if isinstance(current, PlayingState):
            self.state_manager.enqueue_state_change(GameOverState(self, current.score))

    def restart_game(self) -> None:
        self.state_manager.change_state(PlayingState(self))


class PlayingState(State):
    """The running game: the player dodges meteors and birds."""

    BASE_SPAWN_INTERVAL = 2.0

    def __init__(self, game: Game) -> None:
        self.game = game
        self.rng = game.rng
        self.player: Entity = 0
        self.spawn_timer = 0.0
        self.spawn_interval = self.BASE_SPAWN_INTERVAL
        self.game_time = 0.0
        self.score = 0
        self.music = None
        self.input_system: InputSystem | None = None
        self.physics_system: PhysicsSystem | None = None
        self.collision_system: CollisionSystem | None = None
        self.render_system: RenderSystem | None = None
        self.lifetime_system: LifetimeSystem | None = None
        self.animation_system: AnimationSystem | None = None

    def _signature(self, *component_types: type) -> int:
        world = self.game.world
        signature = 0
        for component_type in component_types:
            signature |= 1 << world.get_component_type(component_type)
        return signature

    def enter(self) -> None:
        game = self.game
        world = game.world
        world.reset()

        for component_type in (
            Transform, Physics, Renderable, Collider, Player, Obstacle, Lifetime,
        ):
            world.register_component(component_type)

        self.input_system = world.register_system(InputSystem)
        self.physics_system = world.register_system(PhysicsSystem)
        self.collision_system = world.register_system(CollisionSystem)
        self.render_system = world.register_system(RenderSystem)
        self.lifetime_system = world.register_system(LifetimeSystem)
        self.animation_system = world.register_system(AnimationSystem)
        for system in (
            self.input_system,
            self.physics_system,
            self.collision_system,
            self.render_system,
            self.lifetime_system,
            self.animation_system,
        ):
            system.set_world(world)

        world.set_system_signature(InputSystem, self._signature(Transform, Physics, Player))
        world.set_system_signature(PhysicsSystem, self._signature(Transform, Physics))
        world.set_system_signature(CollisionSystem, self._signature(Transform, Collider))
        world.set_system_signature(RenderSystem, self._signature(Transform, Renderable))
        world.set_system_signature(LifetimeSystem, self._signature(Lifetime))
        world.set_system_signature(AnimationSystem, self._signature(Renderable))

        background = world.create_entity()
        world.add_component(background, Transform(Vec2(0.0, 0.0)))
        world.add_component(
            background,
            Renderable(
                Vec2(800.0, 600.0), WHITE, True,
                game.textures.load(game.asset("Sprites/Background.png")),
            ),
        )

        self.music = game.sounds.play(game.asset("Audio/Terraria Music - Day.wav"))
        self.music.looping = True
        self.music.volume = 40
        self.music.play()

        self.player = world.create_entity()
        world.add_component(self.player, Transform(Vec2(100.0, 400.0)))
        world.add_component(self.player, Physics(Vec2(0.0, 0.0), Vec2(0.0, 0.0), 1.0, True))
        world.add_component(
            self.player,
            Renderable(
                size=Vec2(48.0, 48.0),
                color=BLUE,
                visible=True,
                texture=game.textures.load(game.asset("Sprites/DinosaurWalk.png")),
                texture_rect=TextureRect(0, 0, 48, 48),
                animated=True,
                frame_width=100,
                frame_height=108,
                current_frame=0,
                total_frames=4,
                frame_time=0.08,
            ),
        )
        world.add_component(self.player, Collider(Vec2(33.0, 48.0)))
        world.add_component(self.player, Player(200.0, 400.0, False, True))
        self.collision_system.set_player(self.player)

        ground = world.create_entity()
        world.add_component(ground, Transform(Vec2(0.0, 532.0)))
        world.add_component(ground, Physics(Vec2(0.0, 0.0), Vec2(0.0, 0.0), 1.0, False))
        world.add_component(
            ground,
            Renderable(
                Vec2(800.0, 68.0), GREEN, True,
                game.textures.load(game.asset("Sprites/Ground.png")),
            ),
        )
        world.add_component(ground, Collider(Vec2(800.0, 68.0)))
        world.add_component(ground, Obstacle(ObstacleType.GROUND, 0.0, False))

        self.collision_system.on_player_hit = game.game_over

        self.spawn_timer = 0.0
        self.spawn_interval = self.BASE_SPAWN_INTERVAL
        self.game_time = 0.0
        self.score = 0

    def exit(self) -> None:
        logger.info("leaving the playing state")
        self.input_system = None
        self.physics_system = None
        self.collision_system = None
        self.render_system = None
        self.lifetime_system = None
        self.animation_system = None
        self.game.sounds.stop_all()

    def _require_entered(self) -> None:
        if self.physics_system is None:
            raise RuntimeError("playing state used before it was entered")

    def update(self, dt: float) -> None:
        self._require_entered()
        self.game_time += dt
        self.spawn_timer += dt

        self.update_difficulty()

        if self.spawn_timer >= self.spawn_interval:
            self.spawn_obstacle()
            self.spawn_timer = 0.0

        left, right, jump = self.game.controls()
        self.input_system.update(left, right, jump)
        self.physics_system.update(dt)
        self.collision_system.update()
        self.lifetime_system.update(dt)
        self.animation_system.update(dt)

        self.score = int(self.game_time * 10)

    def render(self, surface: pygame.Surface) -> None:
        self._require_entered()
        self.render_system.update(surface)

        font = self.game.font(24)
        _draw_text(surface, font, f"Score: {self.score}", WHITE, (10, 10))
        _draw_text(
            surface, font, "A: Move Left\nD: Move Right\nSpace: Jump", BLACK, (630, 10)
        )
        _draw_text(surface, font, f"Time: {int(self.game_time)}", WHITE, (10, 40))

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.input_system is not None:
            self.input_system.handle_event(event)

    def spawn_obstacle(self) -> Entity:
        """Spawn a meteor, or after five seconds a meteor or a bird."""
        kind = 0
        if self.game_time > 5.0:
            kind = self.rng.randint(0, 2)
        if kind == 1:
            return self.spawn_cannonball()
        return self.spawn_meteor()

    def spawn_meteor(self) -> Entity:
        world = self.game.world
        meteor = world.create_entity()
        x = self.rng.uniform(50.0, 750.0)

        world.add_component(meteor, Transform(Vec2(x, -60.0)))
        world.add_component(
            meteor,
            Physics(Vec2(0.0, 100.0 + self.game_time * 10.0), Vec2(0.0, 50.0), 1.0, True),
        )
        world.add_component(
            meteor,
            Renderable(
                Vec2(36.0, 60.0), RED, True,
                self.game.textures.load(self.game.asset("Sprites/Meteor.png")),
            ),
        )
        world.add_component(meteor, Collider(Vec2(30.0, 30.0)))
        world.add_component(meteor, Obstacle(ObstacleType.METEOR, 1.0, True))
        world.add_component(meteor, Lifetime(10.0, True))
        return meteor

    def spawn_cannonball(self) -> Entity:
        """Send a bird in from the left or right edge, just above the ground."""
        world = self.game.world
        cannonball = world.create_entity()
        from_left = self.rng.randrange(2) == 0
        speed = 200.0 + self.game_time * 5.0
        x = -55.0 if from_left else 855.0
        velocity_x = speed if from_left else -speed

        world.add_component(cannonball, Transform(Vec2(x, 480.0), Vec2(1.0, 1.0)))
        world.add_component(
            cannonball, Physics(Vec2(velocity_x, 0.0), Vec2(0.0, 0.0), 1.0, False)
        )
        world.add_component(
            cannonball,
            Renderable(
                size=Vec2(63.0, 54.0),
                color=YELLOW,
                visible=True,
                texture=self.game.textures.load(self.game.asset("Sprites/Bird.png")),
                texture_rect=TextureRect(0, 0, 63, 54),
                animated=True,
                frame_width=63,
                frame_height=54,
                current_frame=0,
                total_frames=2,
                frame_time=0.3,
                time_since_last_frame=0.0,
                flip_x=from_left,
            ),
        )
        world.add_component(cannonball, Collider(Vec2(50.0, 30.0)))
        world.add_component(cannonball, Obstacle(ObstacleType.CANNONBALL, 1.0, True))
        world.add_component(cannonball, Lifetime(8.0, True))
        return cannonball

    def update_difficulty(self) -> None:
        """Shorten the spawn interval over time, down to 30% of the base."""
        multiplier = max(0.3, 1.0 - self.game_time * 0.02)
        self.spawn_interval = self.BASE_SPAWN_INTERVAL * multiplier


class GameOverState(State):
    """Shows the final score and waits for restart or quit."""

    def __init__(self, game: Game, final_score: int) -> None:
        self.game = game
        self.final_score = final_score
        self.texts: list[tuple[str, int, Color, tuple[int, int]]] = []

    def enter(self) -> None:
        death = self.game.sounds.play(self.game.asset("Audio/death.wav"))
        death.volume = 40
        death.play()

        self.texts = [
            ("GAME OVER", 48, RED, (250, 200)),
            (f"Final Score: {self.final_score}", 24, WHITE, (320, 280)),
            ("Press R to Restart or ESC to Quit", 18, WHITE, (270, 350)),
        ]

    def exit(self) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        surface.blit(overlay, (0, 0))
        for text, size, color, position in self.texts:
            _draw_text(surface, self.game.font(size), text, color, position)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_r:
            self.game.restart_game()
        elif event.key == pygame.K_ESCAPE:
            self.game.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nairal", description=TITLE)
    parser.add_argument(
        "--assets",
        default="data",
        help="directory holding the Sprites and Audio folders (default: data)",
    )
    args = parser.parse_args(argv)
    try:
        Game(asset_dir=args.assets).run()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())