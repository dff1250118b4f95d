"""
Catalog vocabulary.

Member values are the exact strings crackmes.one prints in its result table
and accepts in the search form, so one table serves both directions:
`Language.parse("C/C++")` reads a cell, `Language.CCPP.value` writes a query.
"""

from enum import Enum


class _WireEnum(Enum):
    @classmethod
    def parse(cls, text: str):
        try:
            return cls(text.strip())
        except ValueError:
            return cls.OTHER

    def __str__(self) -> str:
        return self.value


class Language(_WireEnum):
    CCPP = "C/C++"
    ASSEMBLER = "Assembler"
    JAVA = "Java"
    GO = "Go"
    RUST = "Rust"
    WASM = "WebAssembly"
    BASIC = "(Visual) Basic"
    BORLAND = "Borland Delphi"
    PASCAL = "Turbo Pascal"
    DOTNET = ".NET"
    OTHER = "Unspecified/other"


class Arch(_WireEnum):
    X86 = "x86"
    X86_64 = "x86-64"
    JAVA = "java"
    ARM = "ARM"
    MIPS = "MIPS"
    RISCV = "RISC-V"
    OTHER = "other"


class Platform(_WireEnum):
    DOS = "DOS"
    MACOSX = "Mac OS X"
    MULTIPLATFORM = "Multiplatform"
    UNIX = "Unix/linux etc."
    WINDOWS = "Windows"
    WINDOWS_XP = "Windows 2000/XP only"
    WINDOWS_7 = "Windows 7 Only"
    ANDROID = "Android"
    IOS = "iOS"
    OTHER = "Unspecified/other"


class _Band(Enum):
    @property
    def range(self) -> tuple[int, int]:
        return self.value[1]

    def __str__(self) -> str:
        return self.value[0]


# Bands only narrow the search; the table itself reports decimal scores.
class DifficultyLevel(_Band):
    EASY = ("easy", (1, 2))
    MEDIUM = ("medium", (2, 3))
    HARD = ("hard", (3, 4))
    HARDCORE = ("hardcore", (4, 5))


class QualityLevel(_Band):
    POOR = ("poor", (1, 2))
    FLAKY = ("flaky", (2, 3))
    GOOD = ("good", (3, 4))
    MINT = ("mint", (4, 5))
