"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_stylesheet() -> str:
    """Generate a large stylesheet (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(f"""
/* Section {i} */
.card-{i}, .card-{i}:hover > .title {{
  color: #{i % 256:02x}{i % 256:02x}{i % 256:02x};
  background: url(data:image/png;base64,iVBOR{i}) no-repeat;
  margin: 0 auto;
}}
@media (max-width: {600 + i}px) {{
  .card-{i} {{ padding: {i % 16}px; }}
}}
""")
    return "\n".join(sections)


@pytest.fixture
def real_world_sheets() -> list[str]:
    """Collection of small real-world CSS patterns."""
    return [
        "body{margin:0}",
        "@import url('reset.css') screen;\nhtml, body { height: 100%; }",
        '@charset "utf-8";\na[href^="http"]::after { content: "\\2197"; }',
        "@font-face { x { font-family: Foo; src: url(foo.woff2) format('woff2'); } }",
        "/* only a comment */",
    ]
