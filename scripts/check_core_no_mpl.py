"""Guard against Matplotlib imports in the pure-math core modules.

Distance, unit and placement math must stay usable without a plotting
backend. Paths resolve from the repository root, so the script can be run
from any working directory.
"""

from __future__ import annotations

import ast
from pathlib import Path
import sys
from typing import List

ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = ROOT / "src" / "map_scale"

CORE_MODULES = [
    "constants.py",
    "distance.py",
    "units.py",
    "placement.py",
    "config.py",
    "view.py",
]

FORBIDDEN = ("matplotlib",)


def imported_roots(path: Path) -> List[str]:
    """Top-level package names imported by ``path``."""
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    roots = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            roots.extend(alias.name.split(".")[0] for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            roots.append(node.module.split(".")[0])
    return roots


def main() -> int:
    bad = []
    for name in CORE_MODULES:
        path = PACKAGE_DIR / name
        if not path.exists():
            bad.append(f"{name} is missing")
            continue
        for root in imported_roots(path):
            if root in FORBIDDEN:
                bad.append(f"{name} imports '{root}'")
    if bad:
        sys.stderr.write("Matplotlib import guard failed:\n")
        sys.stderr.write("\n".join(bad))
        sys.stderr.write("\n")
        return 2
    print("Matplotlib import guard passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
