[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Classic data structures and small demonstration programs: stacks, queues, array and linked lists, RPN evaluation, palindrome checks and a student roster menu."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "stack",
    "queue",
    "linked list",
    "doubly linked list",
    "array list",
    "rpn",
    "palindrome",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-messages = "coursekit.messages:main"
coursekit-max = "coursekit.maximum:main"
coursekit-dyad = "coursekit.dyad:main"
coursekit-stack = "coursekit.stack:main"
coursekit-alist = "coursekit.alist:main"
coursekit-llist = "coursekit.linked_list:main"
coursekit-queue = "coursekit.queue_list:main"
coursekit-rpn = "coursekit.rpn:main"
coursekit-palindromes = "coursekit.palindromes:main"
coursekit-roster = "coursekit.roster:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

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
