# --- Portable bootstrap: ensure 'src' is on sys.path and discover project root ---
from __future__ import annotations
import sys
from pathlib import Path

_CUR = Path(__file__).resolve()
_SRC_DIR = _CUR.parent                      # .../PROJECT_ROOT/src
_PROJ_ROOT = _SRC_DIR.parent                # .../PROJECT_ROOT

if not (_PROJ_ROOT / ".result_demo-project").exists():
    for p in _CUR.parents:
        if (p / ".result_demo-project").exists():
            _PROJ_ROOT = p
            _SRC_DIR = _PROJ_ROOT / "src"
            break

if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))
# --- end bootstrap ---

from result_demo.app import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
