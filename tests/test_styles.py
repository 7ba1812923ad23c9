"""
Tests for the theme constants.
"""
import re
from pathlib import Path

import pytest

from ui import styles

ROOT = Path(__file__).resolve().parent.parent
SOURCES = [ROOT / "main.py"] + [
    p for pkg in ("trajectory", "playback", "ui") for p in (ROOT / pkg).glob("**/*.py")
]
COLORS = sorted(
    name for name, value in vars(styles).items()
    if name.isupper() and name != "DARK_STYLESHEET" and isinstance(value, (str, tuple))
)


@pytest.mark.parametrize("name", COLORS)
def test_color_is_used(name):
    pattern = re.compile(rf"\b{name}\b")
    own = Path(styles.__file__).read_text(encoding="utf-8")
    in_stylesheet = f"{{{name}}}" in own
    elsewhere = any(pattern.search(p.read_text(encoding="utf-8")) for p in SOURCES if p.name != "styles.py")
    assert in_stylesheet or elsewhere, f"{name} is defined but never used"
