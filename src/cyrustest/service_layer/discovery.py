"""Import test modules so their test cases register themselves.

A target is one of:

- a dotted module name (``mypkg.tests.test_math``);
- a path to a ``.py`` file;
- a directory, from which every ``test_*.py`` file is imported, recursively,
  in sorted path order. Directories whose name starts with a dot are skipped.
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from cyrustest.domain.errors import CyrusTestError

logger = logging.getLogger(__name__)

TEST_FILE_GLOB = "test_*.py"


class DiscoveryError(CyrusTestError):
    """Raised when a target cannot be found or imported."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Cannot load {target!r}: {reason}")
        self.target = target
        self.reason = reason


def load_targets(targets: Iterable[str]) -> list[ModuleType]:
    """Import every target, in the order given.

    Args:
        targets: Module names, file paths or directories.

    Returns:
        list[ModuleType]: The imported modules.

    Raises:
        DiscoveryError: If a target does not exist or is not importable.
    """
    modules: list[ModuleType] = []
    for target in targets:
        path = Path(target)
        if path.is_dir():
            files = _test_files(path)
            logger.debug("Found %d test files under %s", len(files), path)
            modules.extend(_load_file(file) for file in files)
        elif path.suffix == ".py":
            if not path.is_file():
                raise DiscoveryError(target, "no such file")
            modules.append(_load_file(path))
        else:
            modules.append(_load_module(target))
    return modules


def _test_files(root: Path) -> list[Path]:
    """``test_*.py`` files below ``root``, skipping hidden directories such as ``.venv``."""
    return sorted(
        file
        for file in root.rglob(TEST_FILE_GLOB)
        if not any(part.startswith(".") for part in file.relative_to(root).parent.parts)
    )


def _load_module(name: str) -> ModuleType:
    logger.debug("Importing module %s", name)
    try:
        return importlib.import_module(name)
    except ModuleNotFoundError as e:
        # only the target itself (or a parent package) missing is a discovery problem
        if e.name is None or not (name == e.name or name.startswith(f"{e.name}.")):
            raise
        raise DiscoveryError(name, str(e)) from e


def _digest(path: Path) -> str:
    return hashlib.sha256(str(path).encode("utf-8")).hexdigest()[:12]


def _load_file(path: Path) -> ModuleType:
    path = path.resolve()
    module_name = f"cyrustest_target_{path.stem}_{_digest(path)}"
    if module_name in sys.modules:
        return sys.modules[module_name]

    logger.debug("Importing %s as %s", path, module_name)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise DiscoveryError(str(path), "not an importable Python file")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise
    return module
