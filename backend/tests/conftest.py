"""Shared test fixtures."""

from __future__ import annotations

import pytest


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

# Typical design-tool export: declaration, doctype, comments, editor metadata
EXPORTED_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<!-- Generator: Sketch 52.6 -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"
     xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd"
     width="48px" height="32px" viewBox="0 0 48 32" sodipodi:docname="logo.svg">
  <style>.a { fill: red; }</style>
  <sodipodi:namedview pagecolor="#ffffff"/>
  <defs>
    <linearGradient id="grad" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0" stop-color="#4ECDC4"/>
      <stop offset="1" stop-color="#45B7D1"></stop>
    </linearGradient>
  </defs>
  <g class="layer" fill-rule="evenodd">
    <rect x="0" y="0" width="48" height="32" fill="url(#grad)"></rect>
    <path fill="#FF6B6B" d="M4 4h40v24H4z"/>
    <use xlink:href="#grad"/>
  </g>
</svg>'''

FILLED_COMPLEX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <path d="M128 10 L240 80 L240 200 L128 249 L16 200 L16 80 Z" fill="#4ECDC4"/>
  <path d="M128 50 L200 100 L200 180 L128 220 L56 180 L56 100 Z"/>
  <circle cx="128" cy="130" r="30" fill="#FF6B6B"/>
</svg>'''

THEMED_EXAMPLE_SVG = '<svg viewBox="0 0 10 10"><path fill="red" d="M0 0h10v10H0z"/></svg>'


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def exported_svg() -> str:
    return EXPORTED_SVG


@pytest.fixture
def filled_complex_svg() -> str:
    return FILLED_COMPLEX_SVG
