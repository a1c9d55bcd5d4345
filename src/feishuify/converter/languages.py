"""Code fence language tags to Docx language codes.

The Docx ``code`` block stores its language as a numeric enum.  Aliases
(``js``/``javascript``, ``py``/``python`` ...) share a code.  Anything not
in the table is plain text (``0``).
"""

from __future__ import annotations

from types import MappingProxyType

PLAINTEXT = 0

LANGUAGE_MAP: MappingProxyType[str, int] = MappingProxyType({
    "plaintext": 0,
    "text": 0,
    "abap": 1,
    "ada": 2,
    "apache": 3,
    "apex": 4,
    "applescript": 5,
    "aql": 6,
    "arduino": 7,
    "armasm": 8,
    "asciidoc": 9,
    "aspnet": 10,
    "autohotkey": 11,
    "autoit": 12,
    "bash": 13,
    "shell": 13,
    "sh": 13,
    "basic": 14,
    "batch": 15,
    "bat": 15,
    "cmd": 15,
    "bison": 16,
    "bnf": 17,
    "brainfuck": 18,
    "c": 19,
    "cs": 20,
    "csharp": 20,
    "cpp": 21,
    "c++": 21,
    "cmake": 22,
    "coffeescript": 23,
    "coffee": 23,
    "cos": 24,
    "css": 25,
    "d": 26,
    "dart": 27,
    "diff": 28,
    "django": 29,
    "dns": 30,
    "docker": 31,
    "dockerfile": 31,
    "dos": 32,
    "elixir": 33,
    "elm": 34,
    "erb": 35,
    "erlang": 36,
    "fortran": 37,
    "fsharp": 38,
    "fs": 38,
    "gherkin": 39,
    "go": 40,
    "golang": 40,
    "gradle": 41,
    "graphql": 42,
    "groovy": 43,
    "haml": 44,
    "handlebars": 45,
    "hbs": 45,
    "haskell": 46,
    "haxe": 47,
    "html": 48,
    "http": 49,
    "ini": 50,
    "toml": 50,
    "java": 51,
    "javascript": 52,
    "js": 52,
    "json": 53,
    "julia": 54,
    "kotlin": 55,
    "kt": 55,
    "latex": 56,
    "less": 57,
    "lisp": 58,
    "livescript": 59,
    "lua": 60,
    "makefile": 61,
    "markdown": 62,
    "md": 62,
    "matlab": 63,
    "nginx": 64,
    "nim": 65,
    "nix": 66,
    "objectivec": 67,
    "objc": 67,
    "ocaml": 68,
    "pascal": 69,
    "perl": 70,
    "php": 71,
    "powershell": 72,
    "ps": 72,
    "ps1": 72,
    "prolog": 73,
    "protobuf": 74,
    "puppet": 75,
    "python": 76,
    "py": 76,
    "r": 77,
    "ruby": 78,
    "rb": 78,
    "rust": 79,
    "sass": 80,
    "scala": 81,
    "scheme": 82,
    "scss": 83,
    "smalltalk": 84,
    "sql": 85,
    "stylus": 86,
    "swift": 87,
    "tcl": 88,
    "tex": 89,
    "typescript": 90,
    "ts": 90,
    "vbnet": 91,
    "vb": 91,
    "verilog": 92,
    "vhdl": 93,
    "vim": 94,
    "xml": 95,
    "yaml": 96,
    "yml": 96,
})


def resolve_language(tag: str | None) -> int:
    """Map a code fence info string to a Docx language code.

    Only the first word of the info string is considered, case-insensitively
    (``"Python title=x"`` resolves like ``"python"``).  Missing or unknown
    tags resolve to :data:`PLAINTEXT`.
    """
    if not tag:
        return PLAINTEXT
    words = tag.strip().lower().split()
    if not words:
        return PLAINTEXT
    return LANGUAGE_MAP.get(words[0], PLAINTEXT)


def is_known_language(tag: str | None) -> bool:
    """Return whether the first word of *tag* is in :data:`LANGUAGE_MAP`."""
    if not tag:
        return False
    words = tag.strip().lower().split()
    return bool(words) and words[0] in LANGUAGE_MAP
