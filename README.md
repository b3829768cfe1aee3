# nairal

A small arcade game. You control a dinosaur on the ground and have to dodge
meteors falling from the sky and birds flying in from either side. The
longer you survive, the more often obstacles spawn and the faster they
move. Your score is ten points per second survived.

The game runs on a small entity-component-system core that can also be
used on its own.

## Installing

```
pip install .
```

This installs `pygame`, which is used for the window, drawing, keyboard
input, text and sound.

## Playing

```
nairal [--assets DIR]
```

`--assets` names the directory that holds the game's `Sprites` and `Audio`
folders (default: `data`, relative to the current directory). The game
looks for:

- `Sprites/Background.png`, `Sprites/DinosaurWalk.png`, `Sprites/Ground.png`,
  `Sprites/Meteor.png`, `Sprites/Bird.png`
- `Audio/Terraria Music - Day.wav` (background music, looped) and
  `Audio/death.wav`

A file that cannot be loaded is reported through `logging` and the game keeps
running: an image that failed to load is not drawn, and a sound that failed
to load stays silent. If the game stops on an error, it prints
`Error: <message>` and `nairal` exits with status 1.

Controls:

- `A` / Left arrow: move left
- `D` / Right arrow: move right
- `Space` / Up arrow: jump
- On the game-over screen, `R` restarts and `Esc` quits.
- Closing the window quits at any time.

## The entity-component-system core

`nairal.world.World` ties together entities (`nairal.entities`), component
storage (`nairal.component_store`) and systems (`nairal.systems`):

```python
from nairal.world import World
from nairal.components import Transform, Physics, Vec2
from nairal.physics import PhysicsSystem

world = World()
world.register_component(Transform)
world.register_component(Physics)

physics = world.register_system(PhysicsSystem)
physics.set_world(world)
world.set_system_signature(
    PhysicsSystem,
    (1 << world.get_component_type(Transform)) | (1 << world.get_component_type(Physics)),
)

ball = world.create_entity()
world.add_component(ball, Transform(position=Vec2(0.0, 0.0)))
world.add_component(ball, Physics())

physics.update(0.016)
print(world.get_component(ball, Transform).position)
```

A signature is an integer bit set with one bit per registered component
type (at most 32 types). A system's `entities` set holds every entity whose
signature contains the system's signature, and it is kept up to date as
components are added and removed and as entities are destroyed. At most
5000 entities exist at once; freed ids are reused in the order they were
freed.

The components in `nairal.components` are dataclasses: `Transform`,
`Physics`, `Collider`, `Lifetime`, `Obstacle` (with `ObstacleType`),
`Player` and `Renderable`, built from `Vec2` and `TextureRect`.

The systems that come with the game:

- `nairal.physics.PhysicsSystem`: gravity (980 px/s²), velocity and position.
- `nairal.collision.CollisionSystem`: box overlap checks, landing the player
  on the ground and calling `on_player_hit` when a deadly obstacle touches
  the player.
- `nairal.controls.InputSystem`: `update(left, right, jump)` moves, turns and
  jumps the player and keeps it within the screen.
- `nairal.lifetime.LifetimeSystem`: counts lifetimes down and destroys
  entities whose time is up; `update` returns the destroyed entities.
- `nairal.animation.AnimationSystem`: steps through sprite-sheet frames.
- `nairal.render.RenderSystem`: draws every visible entity onto a pygame
  surface.

`nairal.state.StateManager` switches between `State` objects, either at
once (`change_state`) or after the next update (`enqueue_state_change`).
`nairal.game.Game` accepts its own `TextureManager`, `SoundManager`,
`random.Random` and a `controls` callable returning `(left, right, jump)`,
which makes it possible to drive the game without a keyboard.

## What it does not do

No images or sounds ship with the package; you provide them in the assets
directory. There is no title menu, no pause, and scores are not saved
between games.

## Running the tests

```
pip install .[test]
pytest
```