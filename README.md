# parengine

A small 2D game engine built on pygame. A game is a set of named
scenes; each scene holds sixteen layers (`LayerType.NONE` up to
`LayerType.MAX`), each layer holds game objects, and each game object
holds at most one component of each `ComponentType`: a `Transform`, a
`SpriteRenderer`, an `Animator`, a `Script` or a `Camera`.

Every frame `Application.run` polls input, advances the clock and runs
three passes over the active scene: `update`, `late_update` and
`render`. Rendering goes into a back buffer that is then copied onto the
window surface.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the demo

```
parengine --resources Resources
```

`--resources` names the directory holding the sprite sheets
`ChickenAlpha.bmp` (the cat) and `Player.bmp` (the player); it defaults
to `Resources` in the current directory. If a file cannot be read the
command prints an error and exits with status 1.

The demo opens a 672×846 window and starts in the play scene, which
holds a camera, the player and a cat:

- The cat sits for three seconds, then walks in a random direction;
  after walking for two seconds it either sits down again or lies down.
- Holding the left mouse button makes the player play its watering
  animation, after which it returns to idle.
- `N` switches between the play scene and the title scene.

The frame rate is drawn in the top-left corner as `Time : <fps>`.
Closing the window ends the program.

## Building a scene

```python
from parengine.enums import LayerType
from parengine.gameobject import GameObject
from parengine.scene import Scene, SceneManager, instantiate
from parengine.transform import Transform
from parengine.vector import Vector2

manager = SceneManager()
manager.create_scene("Main", Scene)

box = instantiate(GameObject, LayerType.PLAYER, Vector2(100.0, 100.0), manager)
print(box.get_component(Transform).position)

manager.update()
manager.late_update()
```

`SceneManager.create_scene` builds a scene from a factory, makes it
active, initializes it and registers it under its name; a name already
taken keeps its first scene. `load_scene` calls `on_exit` on the active
scene, switches to the named one and calls its `on_enter`, returning
`None` for an unknown name. `update`, `late_update` and `render` raise
`RuntimeError` when no scene is active.

Components are added by type with `GameObject.add_component`, which
replaces any component of the same kind, and looked up with
`GameObject.get_component`. Every object gets a `Transform` (position,
rotation and scale) when it is created. Game-specific behaviour goes in
a subclass of `Script`.

## Drawing

`Texture.load` reads a `.bmp` or `.png` file and raises
`TextureLoadError` when it cannot. `SpriteRenderer` draws a whole
texture with its top-left corner at its owner's position; in BMP
textures magenta (255, 0, 255) is transparent. PNG textures are turned
by the transform's rotation.

Positions are drawn through the main camera chosen with
`set_main_camera`; a `Camera` centres the screen on its owner's position,
using the size of the open display window as its resolution.

## Animation

An `Animator` holds named animations cut from a sprite sheet, with the
frames laid out left to right:

```python
from parengine.animation import Animator
from parengine.texture import Texture

sheet = Texture()
sheet.load("walk.png")

animator = box.add_component(Animator)
animator.create_animation("Walk", sheet, Vector2(0.0, 0.0), Vector2(32.0, 32.0),
                          Vector2(0.0, 0.0), 4, 0.1)
animator.play_animation("Walk", True)
```

Each frame lasts `duration` seconds and is drawn centred on the owner's
position. A looping animation starts over once it has finished its last
frame; a non-looping one stays complete, which `Animator.is_complete`
reports. Creating an animation under a name that exists, or playing an
unknown name, does nothing.

## Input and time

`Input.update` takes a function telling whether a `KeyCode` is held,
whether the window has focus, and the mouse position. Each key moves
through the `KeyState` values `DOWN` (first frame), `PRESSED` (held),
`UP` (released) and `NONE`; `get_key_down`, `get_key` and `get_key_up`
test for them. Without focus held keys are released.

`Time` measures the seconds between updates from a monotonic clock, or
from the `now` values passed in, and gives the `delta_time` that
animations and scripts use. `Input.shared` and `Time.shared` are the
instances used when none is passed in.

## What it does not do

There is no sound, no saving of game state and no editor. Resources
other than textures cannot be loaded from files: `Animation.load`
raises `io.UnsupportedOperation`. `AnimatorEvent` and `AnimatorEvents`
hold callbacks, but the animator does not call them on its own.