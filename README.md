# glensh

glensh is a small OpenGL scene viewer. It draws a textured cube lit by a
point light, and a second cube that marks where the light is. You move
around the scene with a fly camera. The main shader can be recompiled
while the program runs, so you can edit GLSL and see the result straight
away.

## Installation

```
pip install .
```

You need Python 3.10 or newer and a system that supports OpenGL 3.3 core.
To install the test dependencies as well:

```
pip install ".[test]"
```

## Running

```
glensh
glensh --resources path/to/res
```

`--resources` names the directory that holds the shaders and textures; it
defaults to `./res`. The directory is laid out like this:

```
res/
  shaders/
    default_vertex.glsl
    default_fragment.glsl
    lightCube_vertex.glsl
    lightCube_fragment.glsl
  textures/
    container2.png
    container2_specular.png
    matrix.jpg
```

These files are not shipped with the package; you supply them. A texture
that cannot be loaded is left unbound, and a shader program whose sources
fail to compile or link keeps its handle with no program behind it, so it
can be fixed on disk and recompiled with R.

### Controls

| Input            | Action                                        |
|------------------|-----------------------------------------------|
| W / S            | move forward / backward                       |
| A / D            | strafe left / right                           |
| Space / L-Shift  | move up / down                                |
| Mouse            | look around (while the cursor is captured)    |
| Scroll wheel     | zoom; field of view stays within 30–120°      |
| Escape           | capture or release the cursor                 |
| R                | recompile the main shader program             |

When a recompile fails, the program that was working stays in use.

The window caption shows the frame rate, the camera's pitch, yaw,
position and field of view.

## What the viewer does not do

There is no on-screen settings panel. The clear colour, movement speed
and box position are plain attributes of `glensh.app.App`
(`clear_color`, `movement_speed`, `box_position`) and the light's colour
terms live on `App.light`; change them from code. The material catalogue
in `glensh.materials` is available to your own code but the viewer does
not use it.

## Using the library

The parts of the viewer can also be used on their own.

```python
from glensh.materials import material, material_names
from glensh.geometry import cube_vertices, flatten
from glensh.camera import Camera
from glensh.transforms import translation

gold = material("gold")            # names are case-insensitive
print(gold.shininess)
print(material_names())

data = flatten(cube_vertices())    # 36 vertices * 8 float32: position, normal, uv

camera = Camera()
camera.zoom(1.0)
camera.move({"w", "d"}, delta=0.016, speed=2.5)
view = camera.view_matrix()
proj = camera.projection_matrix(1280 / 720)
mvp = proj @ view @ translation((0.0, 0.0, -3.0))
```

`glensh.transforms` builds 4x4 matrices (`look_at`, `perspective`,
`translation`, `rotation`, `scale_uniform`) in row/column layout for
column vectors, applied as `m @ p`.

`glensh.shader.ShaderRegistry` and `glensh.texture.TextureRegistry` hand out
small integer handles for shader programs and textures; handle 0 is never a
valid one. They do their GL work through a backend object;
`glensh.gl.PygletBackend` is the one the viewer uses, and it raises
`ShaderCompileError` or `ShaderLinkError` when the driver rejects a shader.

`glensh.textio` has `read_file`, `copy_bounded` and `debug`.

## Debug output

`glensh.textio.debug` sends messages at debug level to the standard
`logging` logger named `glensh`. To see them, configure logging, for
example:

```python
import logging
logging.basicConfig(level=logging.DEBUG)
```