[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learn2slither"
version = "0.1.0"
description = "A snake game environment and a small deep Q-learning agent that learns to play it"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["snake", "reinforcement-learning", "q-learning", "dqn", "neural-network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
learn2slither = "learn2slither.agent:main"

[tool.hatch.build.targets.wheel]
packages = ["learn2slither"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
