"""Per-language listing layout and site extension handlers.

Each published SDK language has a :class:`LanguageProfile` describing where
its documentation lives in blob storage and which release catalog owns its
packages. Language-specific site tweaks are provided by a
:class:`LanguageHandler` looked up in an explicit registry; a language
without a registered handler simply gets no extension step.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .listing import NameTransform

logger = logging.getLogger("sdk_doc_index.languages")

DOCFX_CONFIG = "docfx.json"


@dataclass(frozen=True)
class LanguageProfile:
    tag: str
    display_name: str
    blob_prefix: str
    metadata_csv: str
    name_pattern: str | None = None
    name_replacement: str = r"\1"

    @property
    def title(self) -> str:
        return f"Azure SDK for {self.display_name}"

    def name_transform(self) -> NameTransform:
        if self.name_pattern is None:
            return NameTransform.for_prefix(self.blob_prefix)
        return NameTransform(self.name_pattern, self.name_replacement)


PROFILES: dict[str, LanguageProfile] = {
    p.tag: p
    for p in (
        LanguageProfile("dotnet", ".NET", "dotnet/", "dotnet-packages.csv"),
        LanguageProfile("java", "Java", "java/", "java-packages.csv"),
        LanguageProfile(
            "js",
            "JavaScript",
            "javascript/",
            "js-packages.csv",
            name_pattern=r"^javascript/azure-(.*)/$",
            name_replacement=r"@azure/\1",
        ),
        LanguageProfile("python", "Python", "python/", "python-packages.csv"),
        LanguageProfile("c", "C", "c/", "c-packages.csv"),
        LanguageProfile("cpp", "C++", "cpp/", "cpp-packages.csv"),
        LanguageProfile("go", "Go", "go/", "go-packages.csv"),
        LanguageProfile("android", "Android", "android/", "android-packages.csv"),
        LanguageProfile("ios", "iOS", "ios/", "ios-packages.csv"),
    )
}


def get_profile(tag: str) -> LanguageProfile:
    """Return the profile for ``tag``; raises ``KeyError`` if it is unknown."""
    try:
        return PROFILES[tag.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown language '{tag}'. Known languages: {', '.join(sorted(PROFILES))}"
        ) from None


class LanguageHandler(Protocol):
    def update_site_files(self, doc_root: Path, profile: LanguageProfile) -> None:
        """Apply language-specific changes to the generated site project."""


class DocfxMetadataHandler:
    """Stamp the language title into the site project's global metadata."""

    def update_site_files(self, doc_root: Path, profile: LanguageProfile) -> None:
        config = Path(doc_root) / DOCFX_CONFIG
        if not config.exists():
            logger.debug("No %s under %s; skipping metadata update", DOCFX_CONFIG, doc_root)
            return
        data = json.loads(config.read_text(encoding="utf-8"))
        build = data.setdefault("build", {})
        metadata = build.setdefault("globalMetadata", {})
        metadata["_appTitle"] = profile.title
        metadata["_appFooter"] = profile.title
        config.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.info("Updated %s title to '%s'", config, profile.title)


_HANDLERS: dict[str, LanguageHandler] = {
    tag: DocfxMetadataHandler() for tag in PROFILES
}


def register_handler(tag: str, handler: LanguageHandler) -> None:
    _HANDLERS[tag.lower()] = handler


def unregister_handler(tag: str) -> None:
    _HANDLERS.pop(tag.lower(), None)


def resolve_handler(tag: str) -> LanguageHandler | None:
    """Return the handler registered for ``tag``, or ``None`` when there is none."""
    return _HANDLERS.get(tag.lower())


__all__ = [
    "DocfxMetadataHandler",
    "LanguageHandler",
    "LanguageProfile",
    "PROFILES",
    "get_profile",
    "register_handler",
    "resolve_handler",
    "unregister_handler",
]
