"""
Pytest configuration and shared fixtures.
"""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from batview.highlighting import HighlightingAssets


@pytest.fixture
def assets() -> HighlightingAssets:
    """Default highlighting assets."""
    return HighlightingAssets.load()


@pytest.fixture
def output() -> StringIO:
    """Buffer that captures console output."""
    return StringIO()


@pytest.fixture
def plain_console(output: StringIO) -> Console:
    """A 90 column console without color codes."""
    return Console(file=output, width=90, color_system=None, highlight=False)


@pytest.fixture
def sample_source() -> str:
    """A small Python file."""
    return (
        "import os\n"
        "\n"
        "def main():\n"
        "    print(os.getcwd())\n"
        "\n"
        "main()\n"
    )


@pytest.fixture
def sample_file(tmp_path: Path, sample_source: str) -> Path:
    """The sample Python file written to disk."""
    path = tmp_path / "sample.py"
    path.write_text(sample_source, encoding="utf-8")
    return path


@pytest.fixture
def zero_context_diff() -> str:
    """A `git diff -U0` of one file with an addition, a deletion and a modification."""
    return """diff --git a/app/main.py b/app/main.py
index 1234567..abcdefg 100644
--- a/app/main.py
+++ b/app/main.py
@@ -1,2 +0,0 @@
-import sys
-import os
@@ -5,0 +4,2 @@ def main():
+    setup()
+    run()
@@ -9,2 +10,2 @@ def main():
-    return 0
-
+    return 1
+    # done
@@ -20,3 +21,0 @@ def helper():
-    pass
-    pass
-    pass
"""
