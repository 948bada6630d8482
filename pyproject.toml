[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnpair"
version = "0.1.0"
description = "BN254 field tower, curve groups and optimal ate pairing in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["bn254", "bn256", "alt_bn128", "pairing", "elliptic-curve", "finite-field", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bnpair"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
