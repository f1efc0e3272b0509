"""Syntactic command-line classification.

Every token starting with ``--`` names an option. The token after it becomes
its value unless it names an option itself. All other tokens are positional.
The parser knows nothing about which options a program expects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from .errors import OptionConversionError


_OPTION_PREFIX = "--"


def is_option(argument: str) -> bool:
    return argument.startswith(_OPTION_PREFIX)


@dataclass(frozen=True)
class Option:
    name: str
    value: str = ""


@dataclass(frozen=True)
class ConversionResult:
    ok: bool
    value: Any = None
    reason: str = ""

    @classmethod
    def success(cls, value: Any) -> "ConversionResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "ConversionResult":
        return cls(ok=False, reason=reason)


class ProgramOptions:
    """
    Named and positional arguments of one invocation.

    Usage:
        options = ProgramOptions(["--len", "3", "corpus.txt"])
        options.get("--len", int)   # 3
        options.positional          # ["corpus.txt"]
    """

    def __init__(self, arguments: Sequence[str]):
        self._named: List[Option] = []
        self._positional: List[str] = []

        i = 0
        while i < len(arguments):
            argument = arguments[i]
            if is_option(argument):
                value = ""
                if i + 1 < len(arguments) and not is_option(arguments[i + 1]):
                    value = arguments[i + 1]
                    i += 1
                self._named.append(Option(argument, value))
            else:
                self._positional.append(argument)
            i += 1

    @property
    def named(self) -> List[Option]:
        return list(self._named)

    @property
    def positional(self) -> List[str]:
        return list(self._positional)

    def _find(self, name: str) -> Optional[Option]:
        for option in self._named:
            if option.name == name:
                return option
        return None

    def has(self, name: str, require_value: bool = False) -> bool:
        option = self._find(name)
        return option is not None and (not require_value or option.value != "")

    def try_get(self, name: str, type_: Callable[[str], Any] = str) -> ConversionResult:
        """Look up and convert an option value without raising."""

        option = self._find(name)
        if option is None:
            return ConversionResult.failure("option not given")
        if option.value == "":
            return ConversionResult.failure("option has no value")
        try:
            return ConversionResult.success(type_(option.value))
        except (TypeError, ValueError) as exc:
            type_name = getattr(type_, "__name__", repr(type_))
            return ConversionResult.failure(f"cannot convert {option.value!r} to {type_name} ({exc})")

    def get(self, name: str, type_: Callable[[str], Any] = str) -> Any:
        result = self.try_get(name, type_)
        if not result.ok:
            raise OptionConversionError(name, result.reason)
        return result.value

    def get_or_default(self, name: str, default: Any, type_: Callable[[str], Any] = str) -> Any:
        if self._find(name) is None:
            return default
        return self.get(name, type_)
