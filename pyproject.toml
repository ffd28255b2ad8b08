[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galbitools"
version = "0.1.0"
description = "Device-side utilities: a message queue, location-service logging and config parsing, LED control and Bluetooth address extraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "leds", "gps", "message-queue", "bluetooth", "sysfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
galbi-hwaddrs = "galbitools.hwaddrs:main"

[tool.hatch.build.targets.wheel]
packages = ["galbitools"]

[tool.pytest.ini_options]
addopts = "-ra"
