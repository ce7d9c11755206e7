[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtosim"
version = "0.1.0"
description = "A simulated real-time operating system: priority scheduler, interrupts, device drivers and virtual memory in one process"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtos", "simulation", "scheduler", "hal", "virtual-memory", "interrupts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtosim = "rtosim.main:main"

[tool.hatch.build.targets.wheel]
packages = ["rtosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
