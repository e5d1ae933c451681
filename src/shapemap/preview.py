"""Standalone HTML preview of a generated map spec."""

from __future__ import annotations

import json
from html import escape
from pathlib import Path
from typing import Any, Mapping

VEGA_SCRIPTS = (
    "https://cdn.jsdelivr.net/npm/vega@5",
    "https://cdn.jsdelivr.net/npm/vega-lite@5",
    "https://cdn.jsdelivr.net/npm/vega-embed@6",
)


def write_preview_html(
    spec: Mapping[str, Any],
    output_html: Path,
    *,
    title: str = "Shape map preview",
) -> Path:
    """Write an HTML page that embeds `spec` with vega-embed for visual QA."""
    # `</` inside the JSON would close the script element early.
    spec_json = json.dumps(spec, indent=2, ensure_ascii=False).replace("</", "<\\/")
    scripts = [f"  <script src='{escape(src)}'></script>" for src in VEGA_SCRIPTS]
    html = "\n".join(
        [
            "<!doctype html>",
            "<html lang='en'>",
            "<head>",
            "  <meta charset='utf-8'>",
            "  <meta name='viewport' content='width=device-width, initial-scale=1'>",
            f"  <title>{escape(title)}</title>",
            *scripts,
            "  <style>",
            "    body { font-family: Arial, sans-serif; margin: 16px; }",
            "    #error { color: #b22d2d; font-weight: 700; }",
            "  </style>",
            "</head>",
            "<body>",
            f"  <h1>{escape(title)}</h1>",
            "  <div id='map'></div>",
            "  <p id='error'></p>",
            "  <script>",
            f"    const spec = {spec_json};",
            "    vegaEmbed('#map', spec).catch(function (err) {",
            "      document.getElementById('error').textContent = 'Map rendering failed: ' + err;",
            "    });",
            "  </script>",
            "</body>",
            "</html>",
            "",
        ]
    )
    output_html.parent.mkdir(parents=True, exist_ok=True)
    output_html.write_text(html, encoding="utf-8")
    return output_html
