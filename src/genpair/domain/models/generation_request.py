#!/usr/bin/env python3

"""Generation request model and file naming styles."""

from dataclasses import dataclass
from enum import Enum

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def ascii_upper(text: str) -> str:
    """Upper-case ASCII letters only, leaving every other character untouched."""
    return text.translate(_ASCII_UPPER)


class Style(str, Enum):
    """Filename style selecting the header/source extension pair."""

    CPP = "cpp"
    CC = "cc"
    CXX = "cxx"

    @classmethod
    def from_name(cls, name: str | None) -> "Style":
        """
        Resolve a style name, falling back to CPP for unknown values.

        Args:
            name: Style name as given on the command line (case-sensitive)

        Returns:
            Matching Style member, or Style.CPP
        """
        for style in cls:
            if style.value == name:
                return style
        return cls.CPP

    @property
    def extensions(self) -> tuple[str, str]:
        """(header extension, source extension) for this style."""
        match self:
            case Style.CC:
                return "h", "cc"
            case Style.CXX:
                return "hxx", "cxx"
            case _:
                return "hpp", "cpp"


@dataclass(frozen=True)
class GenerationRequest:
    """A single header/source pair to generate."""

    namespace_name: str
    class_name: str
    style: Style = Style.CPP

    @property
    def header_extension(self) -> str:
        return self.style.extensions[0]

    @property
    def source_extension(self) -> str:
        return self.style.extensions[1]

    @property
    def header_file_name(self) -> str:
        return f"{self.class_name}.{self.header_extension}"

    @property
    def source_file_name(self) -> str:
        return f"{self.class_name}.{self.source_extension}"

    @property
    def header_guard(self) -> str:
        """Include guard token, e.g. ``MY_NS_WIDGET_H``."""
        return "_".join(
            ascii_upper(token)
            for token in (self.namespace_name, self.class_name, self.header_extension)
        )
