from __future__ import annotations

from ._gate import require_arch_checks_enabled
from ._utils import iter_python_files, matches_prefix, package_root, parse_imports


def _offenders(subpackage: str, forbidden: tuple[str, ...]) -> list[str]:
    root = package_root()
    offenders: list[str] = []
    for file_path in iter_python_files(root / subpackage):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")
    return offenders


def test_settings_do_not_import_cli_or_rich() -> None:
    require_arch_checks_enabled()

    offenders = _offenders("settings", ("ghrelease.cli", "rich", "typer"))
    assert not offenders, "settings dependency violations:\n" + "\n".join(offenders)


def test_core_does_not_import_upper_layers() -> None:
    require_arch_checks_enabled()

    offenders = _offenders("core", ("ghrelease.cli", "ghrelease.output", "rich", "typer"))
    assert not offenders, "core dependency violations:\n" + "\n".join(offenders)
