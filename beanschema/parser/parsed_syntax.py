"""Parsed syntax marker utilities."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParsedSyntax[T]:
    """Success/failure wrapper for parse routines.

    A present result carries the produced value (which may itself be `None` for
    routines that only consume tokens). An absent result means the routine did not
    recognise its construct; callers decide whether to rewind.
    """

    ok: bool
    value: T | None = None

    @staticmethod
    def present[V](value: V | None = None) -> "ParsedSyntax[V]":
        return ParsedSyntax(ok=True, value=value)

    @staticmethod
    def absent() -> "ParsedSyntax":
        return ParsedSyntax(ok=False)

    def is_present(self) -> bool:
        return self.ok

    def is_absent(self) -> bool:
        return not self.ok

    def unwrap(self) -> T:
        if not self.ok:
            raise ValueError("Cannot unwrap an absent ParsedSyntax")
        return self.value  # type: ignore[return-value]
