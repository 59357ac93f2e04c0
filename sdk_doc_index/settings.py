"""Run configuration for the documentation index.

Values are merged from, lowest to highest precedence:

1. field defaults on :class:`Settings`
2. an optional YAML file (``load_settings(path)``)
3. ``SDK_DOC_INDEX_*`` environment variables, after an optional ``.env``
   file in the working directory has been loaded
4. keyword overrides (typically CLI options); ``None`` values are ignored

Example ``doc-index.yml``::

    language: dotnet
    repo_root: .
    retry_interval: 5
    build_site: false
"""

from __future__ import annotations

import os
from pathlib import Path

import dotenv
import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

from .languages import PROFILES, LanguageProfile, get_profile

ENV_PREFIX = "SDK_DOC_INDEX_"
METADATA_BASE_URL = (
    "https://raw.githubusercontent.com/Azure/azure-sdk/main/_data/releases/latest"
)
BLOB_STORAGE_BASE_URL = "https://azuresdkdocs.blob.core.windows.net/$web"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    language: str = Field(description="Language tag, e.g. 'dotnet' or 'python'.")
    display_name: str | None = Field(
        default=None, description="Title fragment; defaults to the profile's name."
    )
    repo_root: Path = Field(
        default=Path("."), description="Directory holding README.md / CONTRIBUTING.md."
    )
    doc_gen_dir: Path | None = Field(
        default=None, description="Site project directory (<repo_root>/docfx_project)."
    )
    output_dir: Path | None = Field(
        default=None, description="Where the TOC tree is written (doc_gen_dir)."
    )
    metadata_uri: str | None = None
    blob_storage_url: str | None = None
    blob_prefix: str | None = None
    name_pattern: str | None = None
    name_replacement: str | None = None
    fetch_attempts: PositiveInt = 3
    retry_interval: float = Field(default=10.0, ge=0)
    http_timeout: float = Field(default=30.0, gt=0)
    clean_output: bool = True
    build_site: bool = True
    docfx_command: str = "docfx"

    @model_validator(mode="after")
    def _known_language_or_layout(self) -> Settings:
        if self.language.lower() not in PROFILES and not self.blob_prefix:
            raise ValueError(
                f"Unknown language '{self.language}': provide blob_prefix to "
                f"describe its listing layout (known: {', '.join(sorted(PROFILES))})"
            )
        return self

    # Derived values ------------------------------------------------------
    @property
    def profile(self) -> LanguageProfile:
        tag = self.language.lower()
        base = (
            get_profile(tag)
            if tag in PROFILES
            else LanguageProfile(tag, tag, self.blob_prefix or "", f"{tag}-packages.csv")
        )
        return LanguageProfile(
            tag=base.tag,
            display_name=self.display_name or base.display_name,
            blob_prefix=self.blob_prefix or base.blob_prefix,
            metadata_csv=base.metadata_csv,
            name_pattern=(
                base.name_pattern if self.name_pattern is None else self.name_pattern
            ),
            name_replacement=(
                base.name_replacement
                if self.name_replacement is None
                else self.name_replacement
            ),
        )

    @property
    def resolved_doc_gen_dir(self) -> Path:
        return self.doc_gen_dir or self.repo_root / "docfx_project"

    @property
    def resolved_output_dir(self) -> Path:
        return self.output_dir or self.resolved_doc_gen_dir

    @property
    def resolved_metadata_uri(self) -> str:
        return self.metadata_uri or f"{METADATA_BASE_URL}/{self.profile.metadata_csv}"

    @property
    def resolved_blob_storage_url(self) -> str:
        if self.blob_storage_url:
            return self.blob_storage_url
        return (
            f"{BLOB_STORAGE_BASE_URL}?restype=container&comp=list"
            f"&prefix={self.profile.blob_prefix}&delimiter=/"
        )


def _env_values(environ: dict[str, str]) -> dict[str, str]:
    fields = Settings.model_fields
    values = {}
    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX) :].lower()
        if name in fields:
            values[name] = value
    return values


def load_settings(path: str | Path | None = None, **overrides) -> Settings:
    """Build :class:`Settings` from a YAML file, the environment and overrides."""
    data: dict = {}
    if path is not None:
        with open(path, encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file '{path}' must contain a mapping")
        data.update(loaded)
    dotenv.load_dotenv(Path.cwd() / ".env")
    data.update(_env_values(dict(os.environ)))
    data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(data)


__all__ = ["ENV_PREFIX", "Settings", "load_settings"]
