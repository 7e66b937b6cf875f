import numpy as np
import pytest

from glensh.gl import (
    TEXTURE_2D,
    PygletBackend,
    ShaderCompileError,
    ShaderLinkError,
)


class FakeShaderException(Exception):
    pass


class FakeShaderModule:
    ShaderException = FakeShaderException

    def __init__(self, compile_ok=True, link_ok=True, known_uniforms=()):
        self.compile_ok = compile_ok
        self.link_ok = link_ok
        self.known_uniforms = set(known_uniforms)
        self.shaders = []
        self.programs = []
        self._next = 1
        module = self

        class Shader:
            def __init__(self, source, kind):
                if not module.compile_ok:
                    raise FakeShaderException("0:1: syntax error")
                self.source = source
                self.kind = kind
                self.id = module._next
                module._next += 1
                self.deleted = False
                module.shaders.append(self)

            def delete(self):
                self.deleted = True

        class ShaderProgram:
            def __init__(self, *stages):
                if not module.link_ok:
                    raise FakeShaderException("link failed")
                self.stages = stages
                self.id = 100 + len(module.programs)
                self.uniforms = {}
                self.deleted = False
                module.programs.append(self)

            def __setitem__(self, name, value):
                if name not in module.known_uniforms:
                    raise FakeShaderException(f"no uniform {name}")
                self.uniforms[name] = value

            def delete(self):
                self.deleted = True

        self.Shader = Shader
        self.ShaderProgram = ShaderProgram


class FakeGL:
    class GLuint:
        def __init__(self, value=0):
            self.value = value

    def __init__(self):
        self.deleted_shaders = []
        self.deleted_programs = []
        self.used = []
        self.bound = []
        self.images = []
        self.mipmaps = []
        self.active = []
        self.params = []

    def glDeleteShader(self, shader):
        self.deleted_shaders.append(shader)

    def glDeleteProgram(self, program):
        self.deleted_programs.append(program)

    def glUseProgram(self, program):
        self.used.append(program)

    def glGenTextures(self, count, out):
        out.value = 11

    def glBindTexture(self, target, texture_id):
        self.bound.append((target, texture_id))

    def glTexImage2D(self, target, level, internal, w, h, border, fmt, kind, pixels):
        self.images.append((w, h, internal == fmt, bytes(pixels)))

    def glGenerateMipmap(self, target):
        self.mipmaps.append(target)

    def glActiveTexture(self, unit):
        self.active.append(unit)

    def glTexParameteri(self, target, name, value):
        self.params.append((target, name, value))


def make_backend(**options):
    gl = FakeGL()
    shaders = FakeShaderModule(**options)
    return PygletBackend(gl, shaders), gl, shaders


def linked(backend):
    vertex = backend.compile_shader("vertex", "v")
    fragment = backend.compile_shader("fragment", "f")
    return backend.link_program(vertex, fragment)


def test_compile_shader_passes_source_and_returns_id():
    backend, _, shaders = make_backend()
    shader_id = backend.compile_shader("vertex", "void main() {}")
    stage = shaders.shaders[0]
    assert stage.id == shader_id
    assert stage.source == "void main() {}"
    assert stage.kind == "vertex"


def test_compile_fragment_uses_fragment_stage():
    backend, _, shaders = make_backend()
    backend.compile_shader("fragment", "x")
    assert shaders.shaders[0].kind == "fragment"


def test_compile_failure_raises_with_log():
    backend, _, _ = make_backend(compile_ok=False)
    with pytest.raises(ShaderCompileError) as info:
        backend.compile_shader("vertex", "broken")
    assert info.value.log == "0:1: syntax error"


def test_unknown_shader_kind_is_rejected():
    backend, _, _ = make_backend()
    with pytest.raises(ValueError):
        backend.compile_shader("geometry", "x")


def test_link_program_uses_and_releases_stages():
    backend, _, shaders = make_backend()
    program_id = linked(backend)
    program = shaders.programs[0]
    assert program_id == program.id
    assert [stage.kind for stage in program.stages] == ["vertex", "fragment"]
    assert all(stage.deleted for stage in shaders.shaders)
    assert program.deleted is False


def test_link_failure_raises_and_releases_stages():
    backend, _, shaders = make_backend(link_ok=False)
    vertex = backend.compile_shader("vertex", "v")
    fragment = backend.compile_shader("fragment", "f")
    with pytest.raises(ShaderLinkError) as info:
        backend.link_program(vertex, fragment)
    assert info.value.log == "link failed"
    assert all(stage.deleted for stage in shaders.shaders)


def test_link_with_unknown_stage_raises():
    backend, _, _ = make_backend()
    with pytest.raises(ValueError):
        backend.link_program(1, 2)


def test_uniform_location_names_program_and_uniform():
    backend, _, _ = make_backend()
    assert backend.uniform_location(7, "u_ModelMat") == (7, "u_ModelMat")


def test_matrix_upload_is_column_major():
    backend, _, shaders = make_backend(known_uniforms={"u_ModelMat"})
    program_id = linked(backend)
    matrix = np.arange(16, dtype=np.float32).reshape(4, 4)
    backend.set_uniform_matrix4(backend.uniform_location(program_id, "u_ModelMat"), matrix)
    uploaded = shaders.programs[0].uniforms["u_ModelMat"]
    assert len(uploaded) == 16
    for row in range(4):
        for col in range(4):
            assert uploaded[col * 4 + row] == matrix[row][col]


def test_vec3_upload_and_length_check():
    backend, _, shaders = make_backend(known_uniforms={"u_lightPos"})
    program_id = linked(backend)
    location = backend.uniform_location(program_id, "u_lightPos")
    backend.set_uniform_vec3(location, (0.5, 0.25, 1.0))
    assert shaders.programs[0].uniforms["u_lightPos"] == (0.5, 0.25, 1.0)
    with pytest.raises(ValueError):
        backend.set_uniform_vec3(location, (1.0, 2.0))


def test_scalar_uniforms():
    backend, _, shaders = make_backend(known_uniforms={"a", "b"})
    program_id = linked(backend)
    backend.set_uniform_int(backend.uniform_location(program_id, "a"), 2)
    backend.set_uniform_float(backend.uniform_location(program_id, "b"), 0.5)
    assert shaders.programs[0].uniforms == {"a": 2, "b": 0.5}


def test_missing_uniform_is_ignored():
    backend, _, shaders = make_backend(known_uniforms={"a"})
    program_id = linked(backend)
    backend.set_uniform_int(backend.uniform_location(program_id, "missing"), 3)
    backend.set_uniform_int(backend.uniform_location(program_id, "a"), 4)
    assert shaders.programs[0].uniforms == {"a": 4}


def test_create_texture_uploads_pixels():
    backend, gl, _ = make_backend()
    data = bytes(range(2 * 1 * 4))
    texture_id = backend.create_texture(2, 1, True, data)
    assert texture_id == 11
    assert gl.bound == [(TEXTURE_2D, 11)]
    assert gl.images == [(2, 1, True, data)]
    assert gl.mipmaps == [TEXTURE_2D]


def test_create_texture_rejects_wrong_size():
    backend, _, _ = make_backend()
    with pytest.raises(ValueError):
        backend.create_texture(2, 2, False, b"\x00" * 4)


def test_bind_texture_offsets_unit():
    backend, gl, _ = make_backend()
    backend.bind_texture(0, TEXTURE_2D, 5)
    backend.bind_texture(2, TEXTURE_2D, 6)
    assert gl.active[1] - gl.active[0] == 2
    assert gl.bound == [(TEXTURE_2D, 5), (TEXTURE_2D, 6)]


def test_use_and_delete_unknown_ids_go_to_gl():
    backend, gl, _ = make_backend()
    backend.use_program(8)
    backend.delete_program(8)
    backend.delete_shader(3)
    assert gl.used == [8]
    assert gl.deleted_programs == [8]
    assert gl.deleted_shaders == [3]


def test_delete_linked_program_releases_it():
    backend, gl, shaders = make_backend()
    program_id = linked(backend)
    backend.delete_program(program_id)
    assert shaders.programs[0].deleted is True
    assert gl.deleted_programs == []


def test_delete_compiled_stage_releases_it():
    backend, gl, shaders = make_backend()
    shader_id = backend.compile_shader("vertex", "v")
    backend.delete_shader(shader_id)
    assert shaders.shaders[0].deleted is True
    assert gl.deleted_shaders == []