"""Runtime support for MELP programs: strings, lists, arrays, maps, optionals, math, console and file I/O, state storage and runtime errors."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "console",
    "errors",
    "files",
    "hashmap",
    "listtype",
    "mathops",
    "optional",
    "state",
    "strings",
]