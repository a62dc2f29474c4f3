"""Corpus loading from script directories and external packages.

This module gathers the documentation of every script the bot loads.

Sources:
- ``scripts/`` and ``src/scripts/`` under the working directory
- packages declared in ``external-scripts.json``, resolved from
  ``node_modules/`` or as importable Python packages

All sources are loaded concurrently and joined before the corpus is
returned, each bounded by a timeout. A failing source is reported in
LoadResult.errors and never prevents the others from loading. Records
under the same script name are merged with reduce().
"""

import asyncio
import importlib.util
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Awaitable, Mapping, Optional, Union

from better_help.config import HelpConfig
from better_help.docs.parser import parse_file
from better_help.docs.record import DocumentationRecord, reduce
from better_help.errors import SourceLoadError

logger = logging.getLogger("better-help.loader")

Corpus = Mapping[str, DocumentationRecord]

SCRIPT_EXTENSIONS = (".py", ".js", ".coffee", ".ts")

# Local script directories, relative to the working directory
LOCAL_SCRIPT_DIRS = ("scripts", "src/scripts")

# Script directories inside an external package, in lookup order
PACKAGE_SCRIPT_DIRS = ("src/scripts", "src", "scripts")

# Entry files of packages that keep their scripts outside a scripts directory
PACKAGE_ENTRY_FILES = ("index.js", "index.coffee", "index.ts", "__init__.py")

EXTERNAL_SCRIPTS_FILE = "external-scripts.json"

PACKAGE_PREFIX = "hubot-"

# Sub-script wildcard in external-scripts.json
ALL_SCRIPTS = "*"


@dataclass
class _SourceResult:
    records: dict[str, DocumentationRecord] = field(default_factory=dict)
    errors: list[SourceLoadError] = field(default_factory=list)

    def add(self, name: str, record: DocumentationRecord) -> None:
        self.records[name] = reduce(self.records.get(name), record)

    def extend(self, other: "_SourceResult") -> None:
        for name, record in other.records.items():
            self.add(name, record)
        self.errors.extend(other.errors)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one corpus load cycle.

    Attributes:
        corpus: Read-only mapping of script name to documentation record
        errors: Failures of individual sources, in source order
    """

    corpus: Corpus
    errors: tuple[SourceLoadError, ...] = ()


def _is_script(path: Path) -> bool:
    return (
        path.is_file()
        and path.suffix in SCRIPT_EXTENSIONS
        and not path.name.endswith(".d.ts")
        and path.name != "__init__.py"
    )


def _script_name(path: Path) -> str:
    return path.name[: -len(path.suffix)] if path.suffix else path.name


def _package_key(package: str) -> str:
    if package.startswith(PACKAGE_PREFIX):
        return package[len(PACKAGE_PREFIX):]
    return package


def _parse_into(result: _SourceResult, name: str, path: Path, source: str) -> None:
    try:
        result.add(name, parse_file(path))
    except (OSError, UnicodeDecodeError) as exc:
        result.errors.append(SourceLoadError(source, f"cannot read {path.name}: {exc}"))


def _load_directory(path: Path) -> _SourceResult:
    """Parse every script file directly inside ``path``.

    A missing directory yields no records. Any other failure to list the
    directory raises SourceLoadError; unreadable files are reported
    individually.
    """
    result = _SourceResult()
    try:
        entries = sorted(path.iterdir())
    except FileNotFoundError:
        logger.debug("Script directory %s does not exist", path)
        return result
    except OSError as exc:
        raise SourceLoadError(str(path), str(exc)) from exc

    for entry in entries:
        if _is_script(entry):
            _parse_into(result, _script_name(entry), entry, str(path))
    return result


def _declared_packages(declared: Any) -> dict[str, Optional[list[str]]]:
    """Normalize external-scripts.json into package name -> sub-scripts."""
    if isinstance(declared, list) and all(isinstance(name, str) for name in declared):
        return {name: None for name in declared}
    if isinstance(declared, dict) and all(isinstance(scripts, list) for scripts in declared.values()):
        return {name: [str(script) for script in scripts] for name, scripts in declared.items()}
    raise SourceLoadError(
        EXTERNAL_SCRIPTS_FILE,
        "expected a list of package names or an object mapping package names to script lists",
    )


def _entry_file(root: Path) -> Optional[Path]:
    manifest = root / "package.json"
    if manifest.is_file():
        try:
            main = json.loads(manifest.read_text(encoding="utf-8")).get("main")
        except (OSError, ValueError, AttributeError) as exc:
            logger.warning("Ignoring unreadable %s: %s", manifest, exc)
            main = None
        if isinstance(main, str) and main:
            candidate = root / main
            candidates = [candidate] + [
                candidate.with_name(candidate.name + ext) for ext in SCRIPT_EXTENSIONS
            ]
            for path in candidates:
                if path.is_file():
                    return path

    for name in PACKAGE_ENTRY_FILES:
        if (root / name).is_file():
            return root / name
    return None


def _is_restricted(scripts: Optional[list[str]]) -> bool:
    return scripts is not None and ALL_SCRIPTS not in scripts


def _package_scripts(root: Path, scripts: Optional[list[str]]) -> list[Path]:
    """List the files of a package that carry its documentation.

    Packages keep one script per file in the first scripts directory that
    holds any; when ``scripts`` names sub-scripts, only those files are
    used and nothing else is considered. An unrestricted package without a
    scripts directory is documented by its entry file.
    """
    if root.is_file():
        return [root]

    restricted = _is_restricted(scripts)
    for sub_dir in PACKAGE_SCRIPT_DIRS:
        directory = root / sub_dir
        if not directory.is_dir():
            continue
        files = [path for path in sorted(directory.iterdir()) if _is_script(path)]
        if not files:
            continue
        if restricted:
            return [path for path in files if path.name in scripts or _script_name(path) in scripts]
        return files

    if restricted:
        return []
    entry = _entry_file(root)
    return [entry] if entry is not None else []


class CorpusLoader:
    """Loads the help corpus from every declared script source.

    Usage:
        >>> loader = CorpusLoader("/srv/bot", timeout_s=10.0)
        >>> result = asyncio.run(loader.load())
        >>> sorted(result.corpus)
        ['hangouts', 'meme']
    """

    def __init__(self, cwd: Union[str, Path] = ".", timeout_s: float = 30.0) -> None:
        self.cwd = Path(cwd).resolve()
        self.timeout_s = timeout_s

    @classmethod
    def from_config(cls, config: HelpConfig) -> "CorpusLoader":
        return cls(config.cwd, timeout_s=config.source_timeout_s)

    async def load(self) -> LoadResult:
        """Load all sources concurrently and merge them into one corpus.

        The corpus is returned only after every source has finished,
        failed, or timed out. Results merge in source order (local
        directories, then external packages), so the content does not
        depend on which source completes first.
        """
        pending = [
            self._bounded(directory, asyncio.to_thread(_load_directory, self.cwd / directory))
            for directory in LOCAL_SCRIPT_DIRS
        ]
        pending.append(self._bounded(EXTERNAL_SCRIPTS_FILE, self._load_external()))

        combined = _SourceResult()
        for result in await asyncio.gather(*pending):
            combined.extend(result)

        for error in combined.errors:
            logger.error("%s", error)
        logger.info(
            "Loaded help for %d script(s) from %s (%d error(s))",
            len(combined.records),
            self.cwd,
            len(combined.errors),
        )
        return LoadResult(corpus=MappingProxyType(combined.records), errors=tuple(combined.errors))

    async def _bounded(self, source: str, loading: Awaitable[_SourceResult]) -> _SourceResult:
        try:
            return await asyncio.wait_for(loading, timeout=self.timeout_s)
        except asyncio.TimeoutError:
            return _SourceResult(errors=[SourceLoadError(source, f"timed out after {self.timeout_s}s")])
        except SourceLoadError as exc:
            return _SourceResult(errors=[exc])
        except Exception as exc:
            logger.debug("Source %s failed", source, exc_info=True)
            return _SourceResult(errors=[SourceLoadError(source, f"{type(exc).__name__}: {exc}")])

    async def _load_external(self) -> _SourceResult:
        path = self.cwd / EXTERNAL_SCRIPTS_FILE
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError:
            return _SourceResult()
        except OSError as exc:
            raise SourceLoadError(EXTERNAL_SCRIPTS_FILE, str(exc)) from exc

        if not text.strip():
            return _SourceResult()
        try:
            declared = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SourceLoadError(EXTERNAL_SCRIPTS_FILE, f"invalid JSON: {exc}") from exc

        packages = _declared_packages(declared)
        results = await asyncio.gather(
            *(
                self._bounded(package, asyncio.to_thread(self._load_package, package, scripts))
                for package, scripts in packages.items()
            )
        )

        combined = _SourceResult()
        for result in results:
            combined.extend(result)
        return combined

    def _load_package(self, package: str, scripts: Optional[list[str]]) -> _SourceResult:
        root = self._resolve_package(package)
        if root is None:
            raise SourceLoadError(package, "package not found in node_modules or the Python path")

        files = _package_scripts(root, scripts)
        if not files and _is_restricted(scripts):
            raise SourceLoadError(package, f"declared scripts not found: {', '.join(scripts)}")
        if not files:
            logger.warning("Package %s has no documented scripts", package)
            return _SourceResult()

        result = _SourceResult()
        key = _package_key(package)
        for path in files:
            _parse_into(result, key, path, package)
        return result

    def _resolve_package(self, package: str) -> Optional[Path]:
        """Locate an external package on disk.

        Looks in ``node_modules`` under the working directory first, then
        for an importable Python package of the same name (dashes read as
        underscores). Only top-level packages are looked up, so locating one
        never imports it.
        """
        node_package = self.cwd / "node_modules" / package
        if node_package.is_dir():
            return node_package

        module_name = package.replace("-", "_")
        if not module_name.isidentifier():
            return None
        try:
            spec = importlib.util.find_spec(module_name)
        except (ImportError, ValueError):
            spec = None
        if spec is None:
            return None
        if spec.submodule_search_locations:
            return Path(next(iter(spec.submodule_search_locations)))
        if spec.origin and spec.origin not in ("built-in", "frozen"):
            return Path(spec.origin)
        return None
