"""
Exceptions raised when a minimizer's inputs do not describe one function.

Every error carries the offending values as attributes so callers can build
their own diagnostics; the message is only a default rendering of them.
"""


class MinimizerError(ValueError):
    """Base class for all input contract violations."""


class InvalidWidth(MinimizerError):
    def __init__(self, width):
        self.width = width
        super().__init__(f"Width must be a non-negative integer, got {width!r}")


class ConflictingTermFamilies(MinimizerError):
    def __init__(self):
        super().__init__("Mixing minterms and maxterms not allowed")


class RedundantColumnStringInputs(MinimizerError):
    def __init__(self):
        super().__init__(
            "Other terms are redundant when using the columnstring attribute"
        )


class ColumnStringTooShort(MinimizerError):
    def __init__(self, by: int):
        self.by = by
        super().__init__(f"Columnstring length is too short by {by}")


class ColumnStringTooLong(MinimizerError):
    def __init__(self, by: int):
        self.by = by
        super().__init__(f"Columnstring length is too long by {by}")


class MissingTermFamily(MinimizerError):
    def __init__(self):
        super().__init__("Must supply either minterms or maxterms")


class DontCareTermOverlap(MinimizerError):
    def __init__(self, indices: list[int]):
        self.indices = indices
        super().__init__(
            f"Term(s) {', '.join(map(str, indices))} are in both the "
            "don't-care list and the term list."
        )


class TermOutOfRange(MinimizerError):
    def __init__(self, indices: list[int], width: int):
        self.indices = indices
        self.width = width
        super().__init__(
            f"Terms ({', '.join(map(str, indices))}) are larger than {width} bits"
        )


class InvalidDontCareSymbol(MinimizerError):
    def __init__(self, dc: str):
        self.dc = dc
        if len(dc) != 1:
            message = "Don't-care must be a single character"
        else:
            message = "The don't-care character cannot be '0' or '1'"
        super().__init__(f"{message} (got {dc!r})")


class InvalidColumnStringSymbol(MinimizerError):
    def __init__(self, indices: list[int], dc: str):
        self.indices = indices
        self.dc = dc
        super().__init__(
            f"Columnstring rows ({', '.join(map(str, indices))}) are not "
            f"'0', '1' or the don't-care character {dc!r}"
        )


class InsufficientVariableNames(MinimizerError):
    def __init__(self, count: int, width: int):
        self.count = count
        self.width = width
        super().__init__(
            f"Not enough variable names for your width ({count} names, width {width})"
        )
