"""Typed errors for hufftree.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Core code raises them, never catches them.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_UNSUPPORTED_VERSION = 11
EXIT_MALFORMED_HEADER = 12
EXIT_MISSING_TERMINATOR = 13


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage error (invalid args, missing input file, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (bad magic, unexpected error, etc.)"),
    ExitCodeInfo(
        EXIT_UNSUPPORTED_VERSION,
        "UNSUPPORTED_VERSION",
        "Huffman magic family recognized, but not the tagged-tree header",
    ),
    ExitCodeInfo(
        EXIT_MALFORMED_HEADER,
        "MALFORMED_HEADER",
        "Tree header truncated or invalid",
    ),
    ExitCodeInfo(
        EXIT_MISSING_TERMINATOR,
        "MISSING_TERMINATOR",
        "Body ended before the end-of-stream code",
    ),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE, do not edit manually.\n")
    lines.append("> Source of truth: `src/hufftree/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every internal error extends `HuffTreeError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffTreeError(Exception):
    """Base error for hufftree."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffTreeError):
    exit_code = EXIT_USAGE


class CorruptPayload(HuffTreeError):
    exit_code = EXIT_GENERIC


class BadMagic(CorruptPayload):
    """Leading 32-bit tag is not the tagged-tree magic."""


class UnsupportedVersion(BadMagic):
    """Tag belongs to the Huffman family but names another header layout."""

    exit_code = EXIT_UNSUPPORTED_VERSION


class MalformedHeader(CorruptPayload):
    exit_code = EXIT_MALFORMED_HEADER


class MissingTerminator(CorruptPayload):
    exit_code = EXIT_MISSING_TERMINATOR
