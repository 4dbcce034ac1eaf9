[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Text-transform utilities, a small matrix type, a book record file and client/server file processing tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "text processing",
    "matrix",
    "bubble sort",
    "client-server",
    "sockets",
    "named pipe",
    "udp",
    "logging",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-sortbench = "labworks.sortbench:main"
labworks-books = "labworks.books:main"
labworks-letter-groups = "labworks.letter_groups:main"
labworks-processor = "labworks.processor:main"
labworks-server = "labworks.server:main"
labworks-client = "labworks.client:main"
labworks-batch = "labworks.batch:main"
labworks-udp = "labworks.udp_service:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
