"""Conversion settings resolved once from the command line."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class ConvertConfig(BaseModel):
    """Read-only settings for one conversion run."""

    model_config = ConfigDict(frozen=True)

    columns: Tuple[str, ...]
    separator: str = ","
    show_headers: bool = True
    raw: bool = False
    no_root: bool = False
    input_path: Path | None = None
    output_path: Path | None = None

    @field_validator("columns")
    @classmethod
    def columns_present(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Require at least one column and no empty names."""

        if not v:
            raise ValueError("at least one column is required")
        if any(name == "" for name in v):
            raise ValueError("column names must not be empty")
        return v

    @field_validator("separator")
    @classmethod
    def separator_present(cls, v: str) -> str:
        if not v:
            raise ValueError("separator must not be empty")
        return v

    @classmethod
    def from_column_list(
        cls, columns: str | Iterable[str], **kwargs: Any
    ) -> ConvertConfig:
        """Build a config from comma-delimited column arguments.

        Args:
            columns: One comma-delimited string, or several (as given by a
                repeated ``--columns`` option); names keep their order.
            **kwargs: Remaining ConvertConfig fields
        """

        if isinstance(columns, str):
            columns = [columns]
        names = [name for chunk in columns for name in chunk.split(",")]
        return cls(columns=tuple(names), **kwargs)


__all__ = ["ConvertConfig"]
