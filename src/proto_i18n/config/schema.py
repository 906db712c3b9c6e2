"""Configuration schema for proto-i18n using Pydantic models."""

import os
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_PROTO_PATTERN = "internal/common/xerr/errors.proto"
DEFAULT_OUTPUT_DIR = Path("./i18n/")
DEFAULT_LANGUAGES = "en,zh"


class GeneratorConfig(BaseModel):
    """Settings for one catalog generation run."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    proto_pattern: str = Field(
        default=DEFAULT_PROTO_PATTERN,
        description="Path pattern to the .proto files; its directory is searched recursively",
    )
    output_dir: Path = Field(
        default=DEFAULT_OUTPUT_DIR,
        description="Directory the <lang>.toml catalogs are written to",
    )
    languages: list[str] = Field(
        default_factory=lambda: DEFAULT_LANGUAGES.split(","),
        description="Target language codes, one catalog per language",
        min_length=1,
    )
    enum_prefix: str = Field(
        default="",
        description="Only process enums whose name starts with this prefix",
    )
    enum_suffix: str = Field(
        default="",
        description="Only process enums whose name ends with this suffix",
    )
    dry_run: bool = Field(
        default=False,
        description="Render catalogs without writing anything",
    )
    check: bool = Field(
        default=False,
        description="Report catalogs that are out of date without writing them",
    )

    @field_validator("languages", mode="before")
    @classmethod
    def split_languages(cls, v: object) -> object:
        """Accept a comma-separated string and drop blank entries."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            return [str(lang).strip() for lang in v if str(lang).strip()]  # pyright: ignore[reportUnknownVariableType, reportUnknownArgumentType]
        return v

    @field_validator("proto_pattern", mode="before")
    @classmethod
    def keep_raw_pattern(cls, v: object) -> object:
        """Store the pattern as given so a trailing separator is not lost."""
        if isinstance(v, os.PathLike):
            return os.fspath(v)  # pyright: ignore[reportUnknownArgumentType]
        return v

    @property
    def search_root(self) -> Path:
        """Directory that is scanned recursively for definition files."""
        return Path(os.path.dirname(self.proto_pattern) or ".")
