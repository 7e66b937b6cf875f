"""Handle-based registry of 2D textures loaded from image files."""

from __future__ import annotations

import os
from typing import Any

from PIL import Image

from glensh.gl import LINEAR, REPEAT, TEXTURE_2D, TEXTURE_MAG_FILTER, TEXTURE_MIN_FILTER
from glensh.gl import TEXTURE_WRAP_S, TEXTURE_WRAP_T
from glensh.textio import debug

MAX_TEXTURES = 256


class TextureRegistry:
    """Owns texture ids behind handles numbered from 1; handle 0 means none."""

    def __init__(self, backend: Any, max_textures: int = MAX_TEXTURES) -> None:
        if max_textures < 1:
            raise ValueError(f"max_textures must be positive, got {max_textures}")
        self._backend = backend
        self._max = max_textures
        self._ids: list[int] = []

    def generate_2d(self, path: str | os.PathLike[str], alpha: bool) -> int:
        """Load an image, upload it as RGBA (alpha) or RGB, and return its handle.

        Repeat wrapping and linear filtering are applied to the new texture.
        """
        if len(self._ids) >= self._max:
            raise RuntimeError(f"cannot create more than {self._max} textures")
        mode = "RGBA" if alpha else "RGB"
        try:
            with Image.open(path) as image:
                pixels = image.convert(mode)
        except OSError:
            debug("Error in loading the texture %s", path)
            raise
        width, height = pixels.size
        texture_id = self._backend.create_texture(width, height, bool(alpha), pixels.tobytes())
        self.set_wrap(TEXTURE_2D, REPEAT)
        self.set_filter(TEXTURE_2D, LINEAR, LINEAR)
        self._ids.append(texture_id)
        return len(self._ids)

    def activate(self, index: int, target: int, handle: int) -> None:
        """Bind the texture behind handle to texture unit index."""
        self._backend.bind_texture(index, target, self.texture_id(handle))

    def texture_id(self, handle: int) -> int:
        """Return the backend texture id for handle; handle 0 gives 0."""
        if handle == 0:
            return 0
        if not 1 <= handle <= len(self._ids):
            raise KeyError(f"invalid texture handle: {handle}")
        return self._ids[handle - 1]

    def delete(self, handle: int) -> None:
        """Drop a handle; the last texture moves into its slot."""
        if handle == 0:
            return
        if not 1 <= handle <= len(self._ids):
            raise KeyError(f"invalid texture handle: {handle}")
        last = self._ids.pop()
        if handle <= len(self._ids):
            self._ids[handle - 1] = last

    def set_wrap(self, target: int, mode: int) -> None:
        self._backend.tex_parameter(target, TEXTURE_WRAP_S, mode)
        self._backend.tex_parameter(target, TEXTURE_WRAP_T, mode)

    def set_filter(self, target: int, minify: int, magnify: int) -> None:
        self._backend.tex_parameter(target, TEXTURE_MIN_FILTER, minify)
        self._backend.tex_parameter(target, TEXTURE_MAG_FILTER, magnify)