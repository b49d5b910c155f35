[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learngo"
version = "0.1.0"
description = "Small building blocks: greetings, sums, string repetition, shapes, a dictionary and a wallet"
requires-python = ">=3.10"
dependencies = []
keywords = ["greeting", "sums", "shapes", "wallet", "dictionary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
learngo-hello = "learngo.hello_world:main"
learngo-greeter = "learngo.greeter:main"

[tool.hatch.build.targets.wheel]
packages = ["learngo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
