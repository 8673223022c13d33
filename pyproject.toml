[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hxsg"
version = "0.1.0"
description = "Small game backend: SQLite-backed inventories and messages, an HTTP inventory API and a WebSocket feed"
requires-python = ">=3.10"
dependencies = [
    "aiohttp",
]
keywords = ["game", "server", "rpg", "sqlite", "aiohttp", "websocket", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
hxsg = "hxsg.server:main"

[tool.hatch.build.targets.wheel]
packages = ["hxsg"]

[tool.pytest.ini_options]
addopts = "-ra"
