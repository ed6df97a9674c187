from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from tailwind_sort.core.dialects import Dialect

ImportantPosition = Literal["prefix", "core", "suffix"]


@dataclass(frozen=True)
class ContentSection:
    base_offset: int
    text: str

    @property
    def end_offset(self) -> int:
        return self.base_offset + len(self.text)


@dataclass(frozen=True)
class MatchSpan:
    """Document-absolute location of one class-bearing literal's interior."""

    start: int
    end: int
    raw_value: str
    quote_char: str


@dataclass(frozen=True)
class ClassToken:
    raw: str
    variants: tuple[str, ...] = ()
    important: bool = False
    negative: bool = False
    property: str = ""
    value: str | None = None
    arbitrary: str | None = None
    important_position: ImportantPosition | None = None
    dashed: bool = False

    def reassemble(self) -> str:
        """Rebuild the token text from its parsed fields."""
        core = self.property
        if self.arbitrary is not None:
            core += ("-" if self.dashed else "") + f"[{self.arbitrary}]"
        elif self.value is not None:
            core += ("-" if self.dashed else "") + self.value
        if self.negative:
            core = "-" + core
        if self.important_position == "core":
            core = "!" + core
        elif self.important_position == "suffix":
            core += "!"
        text = ":".join((*self.variants, core))
        if self.important_position == "prefix":
            text = "!" + text
        return text


@dataclass(frozen=True)
class FileResult:
    path: Path
    dialect: Dialect
    changed: bool
    written: bool = False
    error: str | None = None
