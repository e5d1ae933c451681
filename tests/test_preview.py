"""Tests for the standalone HTML preview page."""

from __future__ import annotations

from pathlib import Path

from shapemap.preview import VEGA_SCRIPTS, write_preview_html


def test_preview_embeds_spec_and_scripts(tmp_path: Path):
    output = write_preview_html({"layer": []}, tmp_path / "nested" / "map.html", title="A & B")
    html = output.read_text(encoding="utf-8")
    for src in VEGA_SCRIPTS:
        assert src in html
    assert "<title>A &amp; B</title>" in html
    assert 'const spec = {\n  "layer": []\n};' in html


def test_preview_escapes_closing_script_tags(tmp_path: Path):
    spec = {"title": "</script><script>alert(1)</script>"}
    html = write_preview_html(spec, tmp_path / "map.html").read_text(encoding="utf-8")
    assert "</script><script>alert(1)" not in html
    assert "<\\/script>" in html
