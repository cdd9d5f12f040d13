from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    empty_cell: str = " "  # glyph for unoccupied cells
    show_header: bool = True

    @field_validator("empty_cell")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"empty_cell must be exactly one character, got {v!r}")
        return v


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    structured: bool = True  # JSON lines; plain text otherwise


class PointGridConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    render: RenderModel = Field(default_factory=RenderModel)
    log: LogModel = Field(default_factory=LogModel)
