[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dictcipher"
version = "0.1.0"
description = "A typed multi-value dictionary with an interactive menu, and a shifted-alphabet text cipher"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "csv", "caesar", "cipher", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dictcipher = "dictcipher.cli:main"
dictcipher-encrypt = "dictcipher.cipher:encrypt_main"
dictcipher-decrypt = "dictcipher.cipher:decrypt_main"

[tool.hatch.build.targets.wheel]
packages = ["dictcipher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
