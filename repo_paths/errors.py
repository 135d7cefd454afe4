"""Tagged errors reported when a suffix token fails its segment rule."""

from __future__ import annotations

from enum import StrEnum


class ErrorReason(StrEnum):
    """Stage at which decomposition rejected a token."""

    BAD_ERTS_VSN = "bad_erts_vsn"
    BAD_SIDE = "bad_side"
    BAD_PACKAGE_NAME = "bad_package_name"
    BAD_PACKAGE_VSN = "bad_package_vsn"
    BAD_PACKAGE = "bad_package"


class SuffixError(ValueError):
    """A suffix token rejected by the grammar.

    Carries the failing stage (``reason``) and the exact offending token text
    (``token``). Instances are returned as values by the parser and only
    raised by the convenience wrappers that ask for it.
    """

    def __init__(self, reason: ErrorReason | str, token: str):
        self.reason = ErrorReason(reason)
        self.token = token
        super().__init__(self.reason, token)

    def __str__(self) -> str:
        return f"{self.reason.value}: '{self.token}'"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuffixError):
            return NotImplemented
        return (self.reason, self.token) == (other.reason, other.token)

    def __hash__(self) -> int:
        return hash((self.reason, self.token))

    def __repr__(self) -> str:
        return f"SuffixError({self.reason.value!r}, {self.token!r})"


__all__ = ["ErrorReason", "SuffixError"]
