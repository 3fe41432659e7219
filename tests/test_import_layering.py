"""
Test that the dependency layering rule is enforced:
  tgkeyboard/domain/, tgkeyboard/core/ and tgkeyboard/utils/ must NEVER
  import from tgkeyboard/bot/ or from python-telegram-bot.

The grid model stays platform independent; only the bot layer knows
about Telegram.
"""

import ast
import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).parent.parent / "tgkeyboard"

# Directories that must not import from tgkeyboard.bot or telegram
LOWER_LAYERS = ["domain", "core", "utils"]


def _collect_imports(filepath: Path) -> list:
    """Parse a Python file and return (line_number, module_string, level) for all imports.

    For ast.ImportFrom, level is the number of leading dots (relative import depth).
    For ast.Import, level is always 0.
    """
    source = filepath.read_text(encoding="utf-8")
    tree = ast.parse(source, filename=str(filepath))

    results = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                results.append((node.lineno, alias.name, 0))
        elif isinstance(node, ast.ImportFrom):
            results.append((node.lineno, node.module or "", node.level or 0))
    return results


def _resolve_import(filepath: Path, module: str, level: int) -> str:
    """Resolve an import to its absolute dotted form."""
    if level == 0:
        return module

    package_dir = filepath.parent
    for _ in range(level - 1):
        package_dir = package_dir.parent

    relative_to_root = package_dir.relative_to(PACKAGE_ROOT.parent)
    base_str = str(relative_to_root).replace(os.sep, ".")
    if module:
        return f"{base_str}.{module}"
    return base_str


def _find_upward_imports_in_layer(layer: str) -> list:
    """Find all imports from tgkeyboard.bot or telegram in the given layer."""
    violations = []
    layer_dir = PACKAGE_ROOT / layer

    for py_file in layer_dir.rglob("*.py"):
        rel_path = str(py_file.relative_to(PACKAGE_ROOT))
        for lineno, module, level in _collect_imports(py_file):
            resolved = _resolve_import(py_file, module, level)
            top = resolved.split(".")[0]
            if resolved.startswith("tgkeyboard.bot") or top == "telegram":
                violations.append(
                    f"{rel_path}:{lineno} imports {module} (resolves to {resolved})"
                )

    return violations


class TestNoReversedDependencies:
    """Verify lower layers never import from bot/ or telegram."""

    def test_layers_exist(self):
        for layer in LOWER_LAYERS:
            assert (PACKAGE_ROOT / layer).is_dir()

    def test_lower_layers_do_not_import_bot(self):
        for layer in LOWER_LAYERS:
            violations = _find_upward_imports_in_layer(layer)
            assert violations == [], (
                f"{layer}/ has reversed imports:\n"
                + "\n".join(f"  - {v}" for v in violations)
            )

    def test_resolver_handles_relative_imports(self):
        grid_file = PACKAGE_ROOT / "domain" / "grid.py"
        assert _resolve_import(grid_file, "errors", 1) == "tgkeyboard.domain.errors"
        assert _resolve_import(grid_file, "bot.keyboard", 2) == "tgkeyboard.bot.keyboard"
