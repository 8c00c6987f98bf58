[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumicube"
version = "0.1.0"
description = "A lit cube scene with a free-flying camera, rendered with OpenGL 3.3 through pyglet"
requires-python = ">=3.10"
keywords = ["opengl", "pyglet", "lighting", "camera", "shader", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lumicube = "lumicube.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lumicube"]

[tool.pytest.ini_options]
addopts = "-ra"
