[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirecraft"
version = "0.1.0"
description = "A small wireframe 3D engine with a free camera, a follow camera and a jumping player on box platforms."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["3d", "wireframe", "engine", "camera", "pygame", "software-rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wirecraft = "wirecraft.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wirecraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
