"""Architecture enforcement tests for the errctx layering.

The package is layered inward-only:

1) ``config`` and ``log_support`` import nothing else from errctx (besides
   ``config`` internals).
2) ``chain_parts`` (standard chain primitives) may use ``config`` but must not
   import the contextual error layer (``context``/``context_parts``) or
   ``logging``.
3) ``context_parts`` may use everything below it.

These tests are static-file scans to avoid import-time side effects, and they
emit clear failure messages for quick remediation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parent.parent / "errctx"

FORBIDDEN: Dict[str, List[str]] = {
    "config": [
        "from ..chain",
        "from ..context",
        "from ..logging",
        "from ..log_support",
        "import errctx",
        "from errctx",
    ],
    "log_support": [
        "from ..chain",
        "from ..context",
        "from ..config",
        "from ..logging",
        "import errctx",
        "from errctx",
    ],
    "chain_parts": [
        "from ..context",
        "from ..logging",
        "from errctx.context",
        "from errctx.logging",
    ],
}


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all Python source files under ``root``, skipping caches."""

    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    """Read a file as UTF-8 text, replacing undecodable bytes."""

    return path.read_text(encoding="utf-8", errors="replace")


@pytest.mark.parametrize("layer", sorted(FORBIDDEN))
def test_inner_layers_do_not_import_outer_layers(layer: str) -> None:
    """Ensure ``layer`` only depends inward.

    Failure mode
    ------------
    The test fails listing each offending file and the matched forbidden
    import snippet.
    """

    layer_root = PACKAGE_ROOT / layer
    if not layer_root.is_dir():
        pytest.skip(f"{layer_root} not found; skipping boundary check")

    offenders: List[str] = []
    for py in _iter_python_files(layer_root):
        src = _read_text(py)
        offenders.extend(f"{py}: contains '{snippet}'" for snippet in FORBIDDEN[layer] if snippet in src)

    if offenders:
        pytest.fail(f"{layer} must not import outer layers.\n" + "\n".join(offenders))
