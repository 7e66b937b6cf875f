[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glensh"
version = "0.1.0"
description = "A small OpenGL scene viewer: a lit, textured cube with a fly camera and hot-reloadable shaders"
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "shader", "camera", "3d", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glensh = "glensh.app:main"

[tool.hatch.build.targets.wheel]
packages = ["glensh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
