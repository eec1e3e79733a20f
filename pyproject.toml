[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "magicbot"
version = "0.1.0"
description = "A small IRC bot that answers magic 8-ball questions, rolls dice, deals cards and runs blackjack games"
requires-python = ">=3.10"
dependencies = []
keywords = ["irc", "bot", "chat", "magic-8-ball", "blackjack", "dice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat :: Internet Relay Chat",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
magicbot = "magicbot.client:main"

[tool.hatch.build.targets.wheel]
packages = ["magicbot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
