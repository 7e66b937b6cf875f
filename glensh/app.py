"""The lit-cube viewer: scene state, per-frame update and rendering."""

from __future__ import annotations

import argparse
import os
import time
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import numpy as np

from glensh.camera import Camera, FrameClock, Light
from glensh.geometry import FLOATS_PER_VERTEX, cube_vertices, flatten
from glensh.gl import TEXTURE_2D
from glensh.shader import ShaderRegistry
from glensh.texture import TextureRegistry
from glensh.textio import debug
from glensh.transforms import translation

WIDTH = 1280
HEIGHT = 720
SHININESS = 64.0


class App:
    """Holds the scene and drives one frame at a time through a GL backend."""

    def __init__(self, backend: Any, resource_dir: str | os.PathLike[str] = "res") -> None:
        root = Path(resource_dir)
        shaders = root / "shaders"
        textures = root / "textures"
        self.shaders = ShaderRegistry(backend)
        self.textures = TextureRegistry(backend)
        self.camera = Camera()
        self.light = Light()
        self.clock = FrameClock()
        self.clear_color = (0.1, 0.1, 0.1)
        self.movement_speed = 2.5
        self.box_position = np.array([-1.05, -1.3, -3.26])
        self.cursor_captured = False
        self.draw_mesh: Callable[[], None] | None = None

        self.light_shader = self.shaders.create_program(
            shaders / "lightCube_vertex.glsl", shaders / "lightCube_fragment.glsl"
        )
        self.shader = self.shaders.create_program(
            shaders / "default_vertex.glsl", shaders / "default_fragment.glsl"
        )
        self.shaders.use(self.shader)

        self.diffuse_map = self._load_texture(textures / "container2.png", True)
        self.specular_map = self._load_texture(textures / "container2_specular.png", True)
        self.emission_map = self._load_texture(textures / "matrix.jpg", False)

    def on_key_press(self, key: str) -> None:
        """'r' rebuilds the main shader; 'escape' toggles cursor capture."""
        key = key.lower()
        if key == "r":
            self.shaders.recompile(self.shader)
        elif key == "escape":
            self.cursor_captured = not self.cursor_captured

    def update(self, now: float, keys: Iterable[str]) -> float:
        """Advance the clock to now and move the camera; return the frame delta."""
        delta = self.clock.tick(now)
        self.camera.move(keys, delta, self.movement_speed)
        return delta

    def draw(self, aspect: float = WIDTH / HEIGHT) -> None:
        """Set up and draw the lit box, then the light marker."""
        view = self.camera.view_matrix()
        proj = self.camera.projection_matrix(aspect)
        shaders = self.shaders

        shaders.use(self.shader)
        for unit, handle in enumerate((self.diffuse_map, self.specular_map, self.emission_map)):
            self.textures.activate(unit, TEXTURE_2D, handle)
        shaders.set_mat4(self.shader, "u_ModelMat", translation(self.box_position))
        shaders.set_mat4(self.shader, "u_ViewMat", view)
        shaders.set_mat4(self.shader, "u_ProjMat", proj)
        shaders.set_vec3(self.shader, "u_cameraPos", self.camera.position)
        shaders.set_int(self.shader, "material.diffuse", 0)
        shaders.set_int(self.shader, "material.specular", 1)
        shaders.set_int(self.shader, "material.emission", 2)
        shaders.set_float(self.shader, "material.shininess", SHININESS)
        shaders.set_vec3(self.shader, "u_lightPos", self.light.position)
        shaders.set_vec3(self.shader, "light.ambient", self.light.ambient)
        shaders.set_vec3(self.shader, "light.diffuse", self.light.diffuse)
        shaders.set_vec3(self.shader, "light.specular", self.light.specular)
        self._draw()

        shaders.use(self.light_shader)
        shaders.set_mat4(self.light_shader, "u_ModelMat", translation(self.light.position))
        shaders.set_mat4(self.light_shader, "u_ViewMat", view)
        shaders.set_mat4(self.light_shader, "u_ProjMat", proj)
        self._draw()

    def _draw(self) -> None:
        if self.draw_mesh is not None:
            self.draw_mesh()

    def _load_texture(self, path: Path, alpha: bool) -> int:
        try:
            return self.textures.generate_2d(path, alpha)
        except OSError:
            debug("Texture %s unavailable", path)
            return 0

    def _status_text(self) -> str:
        x, y, z = self.camera.position
        fps = 1.0 / self.clock.delta if self.clock.delta > 0 else 0.0
        return (
            f"Glensh App - {fps:.1f} FPS - Pitch: {self.camera.pitch:.2f}, "
            f"Yaw: {self.camera.yaw:.2f} - Position: {x:.2f}, {y:.2f}, {z:.2f} - "
            f"FOV: {self.camera.fov:.2f}"
        )


def main(argv: list[str] | None = None) -> int:
    """Open the viewer window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="glensh", description="Lit cube viewer.")
    parser.add_argument("--resources", default="./res", help="directory holding shaders/ and textures/")
    args = parser.parse_args(argv)

    import pyglet
    from pyglet import gl
    from pyglet.window import key

    from glensh.gl import PygletBackend

    config = gl.Config(
        major_version=3, minor_version=3, forward_compatible=True, depth_size=24, double_buffer=True
    )
    try:
        window = pyglet.window.Window(WIDTH, HEIGHT, "Hello World", config=config)
    except pyglet.window.NoSuchConfigException:
        debug("Failed to create window.")
        return 1

    gl.glEnable(gl.GL_DEPTH_TEST)
    app = App(PygletBackend(), args.resources)

    data = flatten(cube_vertices())
    vao = gl.GLuint()
    gl.glGenVertexArrays(1, vao)
    gl.glBindVertexArray(vao)
    vbo = gl.GLuint()
    gl.glGenBuffers(1, vbo)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
    gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, data.tobytes(), gl.GL_STATIC_DRAW)
    stride = FLOATS_PER_VERTEX * data.itemsize
    for index, (size, offset) in enumerate(((3, 0), (3, 3), (2, 6))):
        gl.glVertexAttribPointer(index, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset * data.itemsize)
        gl.glEnableVertexAttribArray(index)
    vertex_count = len(data) // FLOATS_PER_VERTEX

    def draw_cube() -> None:
        gl.glBindVertexArray(vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, vertex_count)

    app.draw_mesh = draw_cube

    held = key.KeyStateHandler()
    window.push_handlers(held)
    movement = {
        key.W: "w", key.S: "s", key.A: "a", key.D: "d",
        key.SPACE: "space", key.LSHIFT: "left_shift",
    }
    actions = {key.R: "r", key.ESCAPE: "escape"}
    cursor = [0.0, 0.0]
    start = time.perf_counter()

    @window.event
    def on_key_press(symbol: int, modifiers: int):
        if symbol in actions:
            app.on_key_press(actions[symbol])
            window.set_exclusive_mouse(app.cursor_captured)
            return pyglet.event.EVENT_HANDLED
        return None

    @window.event
    def on_mouse_motion(x: int, y: int, dx: int, dy: int) -> None:
        if app.cursor_captured:
            cursor[0] += dx
            cursor[1] -= dy
        else:
            cursor[0], cursor[1] = float(x), float(window.height - y)
        app.camera.on_cursor(cursor[0], cursor[1], app.cursor_captured)

    @window.event
    def on_mouse_scroll(x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        app.camera.zoom(scroll_y)

    @window.event
    def on_resize(width: int, height: int):
        gl.glViewport(0, 0, *window.get_framebuffer_size())
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_draw() -> None:
        gl.glClearColor(*app.clear_color, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        pressed = [name for symbol, name in movement.items() if held[symbol]]
        app.update(time.perf_counter() - start, pressed)
        app.draw(WIDTH / HEIGHT)
        window.set_caption(app._status_text())

    pyglet.app.run()
    return 0