[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanzicards"
version = "0.1.0"
description = "Flashcards for learning Chinese words, served as web pages from a tab-separated deck file"
requires-python = ">=3.10"
dependencies = []
keywords = ["chinese", "hanzi", "pinyin", "flashcards", "vocabulary", "spaced repetition"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hanzicards = "hanzicards.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hanzicards"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
