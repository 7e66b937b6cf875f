"""OpenGL backend used by the shader and texture registries."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np

VERTEX_SHADER = 0x8B31
FRAGMENT_SHADER = 0x8B30

TEXTURE_2D = 0x0DE1
TEXTURE_MAG_FILTER = 0x2800
TEXTURE_MIN_FILTER = 0x2801
TEXTURE_WRAP_S = 0x2802
TEXTURE_WRAP_T = 0x2803
NEAREST = 0x2600
LINEAR = 0x2601
REPEAT = 0x2901
CLAMP_TO_EDGE = 0x812F

_RGB = 0x1907
_RGBA = 0x1908
_UNSIGNED_BYTE = 0x1401
_TEXTURE0 = 0x84C0

_SHADER_KINDS = ("vertex", "fragment")


class ShaderCompileError(RuntimeError):
    """A shader stage failed to compile; ``log`` holds the driver's message."""

    def __init__(self, log: str) -> None:
        super().__init__(f"shader compilation failed:\n{log}")
        self.log = log


class ShaderLinkError(RuntimeError):
    """A shader program failed to link; ``log`` holds the driver's message."""

    def __init__(self, log: str) -> None:
        super().__init__(f"shader program linking failed:\n{log}")
        self.log = log


class PygletBackend:
    """Object wrapper around the OpenGL work the registries need.

    Shader stages and programs are built with pyglet's shader objects and
    referred to by their GL ids. Matrices are given in mathematical layout
    (``m[row][col]``) and uploaded column-major.
    """

    def __init__(self, gl_module: Any = None, shader_module: Any = None) -> None:
        if gl_module is None:
            from pyglet import gl as gl_module
        if shader_module is None:
            from pyglet.graphics import shader as shader_module
        self._gl = gl_module
        self._shader_module = shader_module
        self._stages: dict[int, Any] = {}
        self._programs: dict[int, Any] = {}

    # -- shaders -----------------------------------------------------------

    def compile_shader(self, kind: str, source: str) -> int:
        """Compile one stage ('vertex' or 'fragment') and return its id."""
        if kind not in _SHADER_KINDS:
            raise ValueError(f"unknown shader kind: {kind!r}")
        try:
            stage = self._shader_module.Shader(source, kind)
        except self._shader_module.ShaderException as exc:
            raise ShaderCompileError(str(exc)) from None
        self._stages[stage.id] = stage
        return stage.id

    def link_program(self, vertex: int, fragment: int) -> int:
        """Link two compiled stages into a program; the stages are consumed."""
        try:
            vertex_stage = self._stages.pop(vertex)
            fragment_stage = self._stages.pop(fragment)
        except KeyError as exc:
            raise ValueError(f"unknown shader stage id: {exc.args[0]}") from None
        try:
            program = self._shader_module.ShaderProgram(vertex_stage, fragment_stage)
        except self._shader_module.ShaderException as exc:
            raise ShaderLinkError(str(exc)) from None
        finally:
            vertex_stage.delete()
            fragment_stage.delete()
        self._programs[program.id] = program
        return program.id

    def delete_shader(self, shader_id: int) -> None:
        stage = self._stages.pop(shader_id, None)
        if stage is not None:
            stage.delete()
        else:
            self._gl.glDeleteShader(shader_id)

    def delete_program(self, program_id: int) -> None:
        program = self._programs.pop(program_id, None)
        if program is not None:
            program.delete()
        else:
            self._gl.glDeleteProgram(program_id)

    def use_program(self, program_id: int) -> None:
        self._gl.glUseProgram(program_id)

    # -- uniforms ----------------------------------------------------------

    def uniform_location(self, program_id: int, name: str) -> tuple[int, str]:
        """Return an opaque location naming one uniform of one program."""
        return (program_id, name)

    def set_uniform_matrix4(self, location: tuple[int, str], matrix: Any) -> None:
        values = np.asarray(matrix, dtype=np.float32).reshape(4, 4).flatten(order="F")
        self._assign(location, tuple(values.tolist()))

    def set_uniform_vec3(self, location: tuple[int, str], vector: Iterable[float]) -> None:
        components = tuple(float(c) for c in vector)
        if len(components) != 3:
            raise ValueError(f"expected 3 components, got {len(components)}")
        self._assign(location, components)

    def set_uniform_int(self, location: tuple[int, str], value: int) -> None:
        self._assign(location, int(value))

    def set_uniform_float(self, location: tuple[int, str], value: float) -> None:
        self._assign(location, float(value))

    # -- textures ----------------------------------------------------------

    def create_texture(self, width: int, height: int, rgba: bool, data: bytes) -> int:
        """Upload 8-bit RGB or RGBA pixels as a mipmapped 2D texture; return its id."""
        expected = width * height * (4 if rgba else 3)
        if len(data) != expected:
            raise ValueError(f"expected {expected} bytes of pixel data, got {len(data)}")
        gl = self._gl
        texture = gl.GLuint(0)
        gl.glGenTextures(1, texture)
        gl.glBindTexture(TEXTURE_2D, texture.value)
        pixel_format = _RGBA if rgba else _RGB
        gl.glTexImage2D(
            TEXTURE_2D, 0, pixel_format, width, height, 0, pixel_format, _UNSIGNED_BYTE,
            bytes(data),
        )
        gl.glGenerateMipmap(TEXTURE_2D)
        return texture.value

    def bind_texture(self, unit: int, target: int, texture_id: int) -> None:
        self._gl.glActiveTexture(_TEXTURE0 + unit)
        self._gl.glBindTexture(target, texture_id)

    def tex_parameter(self, target: int, name: int, value: int) -> None:
        self._gl.glTexParameteri(target, name, value)

    # -- helpers -----------------------------------------------------------

    def _assign(self, location: tuple[int, str], value: Any) -> None:
        # Uniforms that do not exist are ignored, as GL does for location -1.
        program_id, name = location
        program = self._programs.get(program_id)
        if program is None:
            return
        try:
            program[name] = value
        except (KeyError, self._shader_module.ShaderException):
            pass