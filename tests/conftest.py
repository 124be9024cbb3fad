from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure():
    # Project root on sys.path for absolute imports like 'extension.relay' and 'server'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
