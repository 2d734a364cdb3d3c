"""
HTML Renderer - Embed diff text and diff2html assets into a standalone page
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from string import Template

from pydantic import BaseModel

from .errors import HtmlWriteError

logger = logging.getLogger(__name__)

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent.parent / "static" / "diff2html"

HIGHLIGHT_CSS = "github.min.css"
DIFF2HTML_CSS = "diff2html.min.css"
DIFF2HTML_JS = "diff2html-ui.min.js"

PAGE_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="en-us">
<head>
  <meta charset="utf-8" />
  <meta name="google" content="notranslate" />
</head>
<style type="text/css">
$highlight_css
</style>
<style type="text/css">
$diff2html_css
</style>
<script type="text/javascript">
$diff2html_js
</script>
<script>
  const diffString = `
$diff_string
  `;

  document.addEventListener('DOMContentLoaded', function () {
    var targetElement = document.getElementById('myDiffElement');
    var configuration = {
      drawFileList: true,
      fileListToggle: true,
      fileListStartVisible: true,
      fileContentToggle: true,
      matching: 'lines',
      outputFormat: 'side-by-side',
      synchronisedScroll: true,
      highlight: true,
      renderNothingWhenEmpty: true,
    };
    var diff2htmlUi = new Diff2HtmlUI(targetElement, diffString, configuration);
    diff2htmlUi.draw();
    diff2htmlUi.highlightCode();
  });
</script>
<body>
  <div id="myDiffElement"></div>
</body>
</html>
""")


class DiffAssets(BaseModel):
    """Static stylesheets and script inlined into every page"""

    highlight_css: str = ""
    diff2html_css: str = ""
    diff2html_js: str = ""


def _read_asset(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Rendering asset %s unavailable, embedding nothing: %s", path, e)
        return ""


def load_assets(assets_dir: str | Path | None = None) -> DiffAssets:
    """Load the bundled assets; a missing file becomes an empty string"""
    base = Path(assets_dir) if assets_dir else DEFAULT_ASSETS_DIR
    return DiffAssets(
        highlight_css=_read_asset(base / HIGHLIGHT_CSS),
        diff2html_css=_read_asset(base / DIFF2HTML_CSS),
        diff2html_js=_read_asset(base / DIFF2HTML_JS),
    )


def escape_template_literal(text: str) -> str:
    """Escape text for a JavaScript template literal inside a <script> element"""
    return (
        text.replace("\\", "\\\\")
        .replace("`", "\\`")
        .replace("$", "\\$")
        .replace("</", "<\\/")
    )


def join_diffs(diffs: Sequence[Sequence[str]]) -> str:
    blocks = ["".join(f"{line}\n" for line in diff) for diff in diffs]
    return "\n".join(blocks)


def render_html(diffs: Sequence[Sequence[str]], assets: DiffAssets | None = None) -> str:
    """Render one or more diff blocks into a self-contained HTML document"""
    if assets is None:
        assets = load_assets()
    return PAGE_TEMPLATE.substitute(
        highlight_css=assets.highlight_css,
        diff2html_css=assets.diff2html_css,
        diff2html_js=assets.diff2html_js,
        diff_string=escape_template_literal(join_diffs(diffs)),
    )


def write_html(
    html_path: str | Path,
    diffs: Sequence[Sequence[str]],
    assets: DiffAssets | None = None,
) -> Path:
    """Render and write the page, returning the written path"""
    path = Path(html_path)
    html = render_html(diffs, assets)
    try:
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise HtmlWriteError(f"Failed to generate HTML at {path}: {e}") from e
    logger.info("Wrote diff page to %s", path)
    return path
