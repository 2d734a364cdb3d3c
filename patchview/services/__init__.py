"""Services module - Diff, patch and rendering logic"""

from .config_manager import ConfigManager
from .context_merger import extract_range, merge_context
from .diff_generator import DiffGenerator
from .documents import read_lines, split_patch_text
from .errors import DocumentReadError, HtmlWriteError, PatchApplyError, PatchViewError
from .html_renderer import DiffAssets, load_assets, render_html, write_html
from .hunk_parser import parse_hunk_header, parse_unified_diff
from .patch_applier import apply_patch
from .patch_sanitizer import iter_sanitized, sanitize_patch

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "extract_range",
    "merge_context",
    "parse_hunk_header",
    "parse_unified_diff",
    "iter_sanitized",
    "sanitize_patch",
    "apply_patch",
    "DiffAssets",
    "load_assets",
    "render_html",
    "write_html",
    "read_lines",
    "split_patch_text",
    # Errors
    "PatchViewError",
    "DocumentReadError",
    "PatchApplyError",
    "HtmlWriteError",
]
