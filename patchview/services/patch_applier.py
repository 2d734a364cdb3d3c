"""
Patch Applier - Apply a single-file unified diff to a base document
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from unidiff import PatchSet
from unidiff.errors import UnidiffParseError

from .errors import PatchApplyError

logger = logging.getLogger(__name__)


def _line_text(line) -> str:
    return line.value.rstrip("\n")


def apply_patch(original: Sequence[str], patch_lines: Sequence[str]) -> list[str]:
    """Apply the hunks of `patch_lines` to `original` and return the result.

    Context and removed lines must match the base exactly; any mismatch,
    unparsable patch or multi-file patch raises PatchApplyError.
    """
    try:
        patch = PatchSet.from_string("\n".join(patch_lines) + "\n")
    except UnidiffParseError as e:
        raise PatchApplyError(f"Failed to parse patch: {e}") from e

    if len(patch) != 1:
        raise PatchApplyError(f"Expected a patch for one file, found {len(patch)}")
    patched_file = patch[0]
    if patched_file.is_binary_file:
        raise PatchApplyError(f"Cannot apply binary patch for {patched_file.path}")

    result: list[str] = []
    cursor = 0
    offset = 0

    for hunk in patched_file:
        if hunk.source_length:
            start = hunk.source_start - 1
        else:
            # Pure insertion: locate it from the target side, both numbering styles agree there
            start = hunk.target_start - 1 - offset
        if start < cursor or start > len(original):
            raise PatchApplyError(
                f"Hunk @@ -{hunk.source_start},{hunk.source_length} @@ is out of order or out of range"
            )

        result.extend(original[cursor:start])
        cursor = start

        for line in hunk:
            if line.is_added:
                result.append(_line_text(line))
                continue
            if not (line.is_context or line.is_removed):
                continue
            text = _line_text(line)
            if cursor >= len(original) or original[cursor] != text:
                logger.warning("Patch mismatch at line %d of %s", cursor + 1, patched_file.path)
                raise PatchApplyError(f"Patch does not match base at line {cursor + 1}: {text!r}")
            if line.is_context:
                result.append(text)
            cursor += 1

        offset += hunk.target_length - hunk.source_length

    result.extend(original[cursor:])
    return result
