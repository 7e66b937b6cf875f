"""Handle-based registry of shader programs built from source files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from glensh.gl import ShaderCompileError, ShaderLinkError
from glensh.textio import copy_bounded, debug, read_file

MAX_PROGRAMS = 256
MAX_PATH = 512


@dataclass
class _Program:
    vertex_path: str
    fragment_path: str
    program_id: int = 0


class ShaderRegistry:
    """Owns shader programs behind small integer handles (0 is never valid).

    A program whose sources fail to build keeps its handle with program id 0,
    so it can be fixed on disk and recompiled later.
    """

    def __init__(self, backend: Any, max_programs: int = MAX_PROGRAMS) -> None:
        if max_programs < 1:
            raise ValueError(f"max_programs must be positive, got {max_programs}")
        self._backend = backend
        self._max = max_programs
        self._programs: dict[int, _Program] = {}
        self._free: list[int] = []
        self._size = 0

    def create_program(
        self, vertex_path: str | os.PathLike[str], fragment_path: str | os.PathLike[str]
    ) -> int:
        """Register and build a program from two source files; return its handle."""
        debug("Creating Shader...")
        handle = self._allocate()
        program = _Program(
            copy_bounded("", os.fspath(vertex_path), MAX_PATH),
            copy_bounded("", os.fspath(fragment_path), MAX_PATH),
        )
        self._programs[handle] = program
        program.program_id = self._build(program)
        debug("Shader Created Succesfully!")
        return handle

    def recompile(self, handle: int) -> bool:
        """Rebuild from the files on disk; keep the old program if that fails."""
        if handle == 0:
            raise ValueError("invalid shader handle: 0")
        program = self._lookup(handle)
        debug("Recompiling Shader...")
        new_id = self._build(program)
        if new_id == 0:
            debug("Failed to recompile shader program.")
            return False
        if program.program_id:
            self._backend.delete_program(program.program_id)
        program.program_id = new_id
        debug("Successfully recompiled shader program.")
        return True

    def use(self, handle: int) -> None:
        """Make the program current; handle 0 is ignored."""
        if handle == 0:
            return
        self._backend.use_program(self.program_id(handle))

    def delete(self, handle: int) -> None:
        """Release the handle and its program."""
        program = self._lookup(handle)
        if program.program_id:
            self._backend.delete_program(program.program_id)
        del self._programs[handle]
        if handle == self._size:
            self._size -= 1
        else:
            self._free.append(handle)

    def program_id(self, handle: int) -> int:
        """Return the backend program id behind a handle (0 if it failed to build)."""
        return self._lookup(handle).program_id

    def set_mat4(self, handle: int, name: str, matrix: Any) -> None:
        self._backend.set_uniform_matrix4(self._location(handle, name), matrix)

    def set_vec3(self, handle: int, name: str, vector: Any) -> None:
        self._backend.set_uniform_vec3(self._location(handle, name), vector)

    def set_int(self, handle: int, name: str, value: int) -> None:
        self._backend.set_uniform_int(self._location(handle, name), value)

    def set_float(self, handle: int, name: str, value: float) -> None:
        self._backend.set_uniform_float(self._location(handle, name), value)

    def _location(self, handle: int, name: str) -> int:
        return self._backend.uniform_location(self.program_id(handle), name)

    def _lookup(self, handle: int) -> _Program:
        try:
            return self._programs[handle]
        except KeyError:
            raise KeyError(f"invalid shader handle: {handle}") from None

    def _allocate(self) -> int:
        if self._free:
            return self._free.pop()
        if self._size >= self._max:
            debug("Error: Max Handles Achieved. Can't create more Shaders.")
            raise RuntimeError(f"cannot create more than {self._max} shader programs")
        self._size += 1
        return self._size

    def _build(self, program: _Program) -> int:
        try:
            return self._compile(program)
        except (OSError, ShaderCompileError, ShaderLinkError) as exc:
            debug("Shader build failed: %s", exc)
            return 0

    def _compile(self, program: _Program) -> int:
        backend = self._backend
        vertex = backend.compile_shader("vertex", read_file(program.vertex_path))
        try:
            fragment = backend.compile_shader("fragment", read_file(program.fragment_path))
        except (OSError, ShaderCompileError):
            backend.delete_shader(vertex)
            raise
        return backend.link_program(vertex, fragment)