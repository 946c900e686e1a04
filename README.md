# sandfall

A small falling-sand sandbox. Pixels are placed into a bounded world, fall
one row per step until they land on the floor or on another pixel, and can
be erased again. Alongside the simulation the package ships a skyline
bottom-left / best-fit rectangle packer, handy for building texture atlases.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The sandbox

```python
from sandfall.scene import SandboxScene
from sandfall.pixel import Behaviour

scene = SandboxScene(320, 240)               # world width and height in pixels
scene.set_brush_color(1.0, 0.5, 0.0, 1.0)    # floats in 0..1, truncated to 8 bits
scene.current_behaviour = Behaviour.DYNAMIC
pixel = scene.place(10, 0)                   # the new Pixel, or None if outside/occupied
for _ in range(5):
    scene.step()                             # returns how many pixels fell
removed = scene.erase(10, 5)                 # list of pixels that covered (10, 5)
```

`SandboxScene(width, height, on_place=None, on_erase=None)` raises
`ValueError` for a non-positive size. The optional callbacks are called with
each pixel that `place` adds or `erase` removes, for example to play a sound.
`set_background_color(red, green, blue)` sets an opaque background colour the
same way as the brush. `nearby(rect)` returns the pixels in and directly
around a rectangle.

Mouse input follows the rules of an interactive session.
`handle_mouse(x, y, left, right, ui_captured)` does nothing while
`ui_captured` is true or the cooldown is still at 1 or more; otherwise a left
press places a pixel with the current brush (resetting the cooldown to 100
only if a pixel was placed), and a right press resets the cooldown and erases.
`update()` runs one frame: it multiplies the cooldown by 0.1, calls `step()`,
then applies the state stored in `scene.mouse` (a `MouseState` with `x`, `y`,
`left`, `right` and `ui_captured`).

Pixels (`sandfall.pixel.Pixel`) are 1×1 cells with a `Color` and a
`Behaviour`: `STATIC` pixels stay where they are placed, `DYNAMIC` and
`WATER` pixels both fall under gravity. `Pixel.update(nearby, world_height)`
moves a pixel down one row unless it is on the bottom row or
`collides_with` one of the given neighbours, and returns whether it fell.

The building blocks live in `sandfall.geometry`: the frozen `Rect` (with
`intersects`, `contains_point`, `shifted` and the `empty`, `right` and
`bottom` properties), the frozen `Color` (channels checked to lie in
0..255), `color_from_floats` and the plain 32×32 `Entity`.

## Rectangle packing

```python
from sandfall.rectpack import RectPacker, PackRect, Heuristic

packer = RectPacker(256, 256, num_nodes=256)
packer.set_heuristic(Heuristic.SKYLINE_BF_SORT_HEIGHT)
rects = [PackRect(id=i, w=w, h=h) for i, (w, h) in enumerate([(64, 32), (100, 100), (30, 200)])]
all_packed = packer.pack(rects)
for r in rects:
    print(r.id, r.was_packed, r.x, r.y)
```

`pack` sorts by height then width (tallest first), fills in each
rectangle's `x`, `y` and `was_packed` in place and returns whether every
rectangle fitted. Rectangles that do not fit get `x` and `y` of `None`;
zero-sized ones are placed at `(0, 0)`. Calling `pack` again keeps packing
into the same target. By default widths are rounded up to a multiple of
`ceil(width / num_nodes)` so the node pool can never run out; call
`allow_out_of_mem(True)` for exact widths that may fail when the pool is
exhausted. `set_heuristic` accepts a `Heuristic` or its integer value and
raises `ValueError` for anything else. The `skyline` and `free_nodes`
properties show the packer's current state.

## What it does not do

There is no window, drawing, sound, menu or colour picker, and no command to
run: the package holds the simulation state and rules, and leaves input,
rendering and audio to whatever loop drives it.