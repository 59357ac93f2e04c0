"""Static-site collaborators: the external builder and home page assets."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from .errors import SiteBuildError
from .rendering.toc import API_DIRNAME, TOC_FILENAME

logger = logging.getLogger("sdk_doc_index.site")

HOME_PAGES = {
    "README.md": f"{API_DIRNAME}/index.md",
    "CONTRIBUTING.md": f"{API_DIRNAME}/CONTRIBUTING.md",
}


class SiteBuilder(Protocol):
    def init(self, output_dir: Path) -> None: ...

    def build(self, config_path: Path) -> None: ...


class DocfxSiteBuilder:
    """Drive the ``docfx`` command line tool."""

    def __init__(self, command: str = "docfx"):
        self.command = command

    def _run(self, *args: str) -> None:
        argv = [self.command, *args]
        logger.info("Running %s", " ".join(argv))
        try:
            subprocess.run(argv, check=True)
        except (OSError, subprocess.CalledProcessError) as error:
            raise SiteBuildError(f"'{' '.join(argv)}' failed: {error}") from error

    def init(self, output_dir: Path) -> None:
        self._run("init", "-q", "-o", str(output_dir))

    def build(self, config_path: Path) -> None:
        self._run("build", str(config_path))


def clean_output_dir(output_root: str | Path) -> None:
    """Remove previously rendered TOC files so a rerun starts from scratch."""
    root = Path(output_root)
    api_dir = root / API_DIRNAME
    if api_dir.is_dir():
        shutil.rmtree(api_dir)
    (root / TOC_FILENAME).unlink(missing_ok=True)


def copy_home_pages(repo_root: str | Path, output_root: str | Path) -> list[Path]:
    """Copy the repository README and contribution guide into the API section."""
    copied: list[Path] = []
    for source_name, target_name in HOME_PAGES.items():
        source = Path(repo_root) / source_name
        if not source.is_file():
            logger.warning("Home page source %s not found; skipping", source)
            continue
        target = Path(output_root) / target_name
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        copied.append(target)
    return copied


__all__ = [
    "DocfxSiteBuilder",
    "HOME_PAGES",
    "SiteBuilder",
    "clean_output_dir",
    "copy_home_pages",
]
