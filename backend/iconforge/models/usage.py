"""Usage finder records."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UsagePattern(BaseModel):
    """Literal fragments that reference one icon name in source text.

    Bare ``name`` and bare PascalCase are deliberately absent: they match
    ordinary prose far too often.
    """

    name: str
    filename: str
    double_quoted: str
    single_quoted: str
    backtick_quoted: str
    class_form: str
    namespaced: str
    opening_tag: str

    model_config = {"frozen": True}

    @property
    def fragments(self) -> list[str]:
        return [
            self.filename,
            self.double_quoted,
            self.single_quoted,
            self.backtick_quoted,
            self.class_form,
            self.namespaced,
            self.opening_tag,
        ]

    def __contains__(self, fragment: object) -> bool:
        return fragment in self.fragments


class UsageMatch(BaseModel):
    file: str = ""
    offset: int = Field(..., description="Character offset in the scanned text")
    byte_offset: int = Field(..., description="UTF-8 byte offset in the scanned text")
    line: int = Field(..., description="1-based line")
    column: int = Field(..., description="1-based column")
    matched_pattern: str
    line_text: str = ""
    expanded_text: str | None = Field(
        default=None,
        description="Whole multi-line tag or inline <svg> span around the match",
    )

    model_config = {"frozen": True}
