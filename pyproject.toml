[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noffkit"
version = "0.1.0"
description = "Convert MIPS COFF executables to NOFF and model the kernel side of loading and serving them"
requires-python = ">=3.10"
dependencies = []
keywords = ["coff", "noff", "mips", "executable", "loader", "operating-systems"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coff2noff = "noffkit.coff2noff:main"

[tool.hatch.build.targets.wheel]
packages = ["noffkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
