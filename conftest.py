"""Root conftest: put this checkout's src/ first on sys.path.

Lets the test suite import glyphsmith_mcp from a plain checkout, and makes
sure a stale editable install elsewhere never shadows the working tree.
"""

import pathlib
import sys

_src = str(pathlib.Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)
