"""
Exceptions for the Puncturable PRF

Generation failures, out-of-range inputs and malformed persisted state
each get their own type so callers can tell them apart.
"""


class PprfError(Exception):
    """Base class for all puncturable PRF errors."""


class ParameterGenerationError(PprfError, ValueError):
    """The RSA modulus or the accumulator generator could not be produced."""


class InputIndexError(PprfError, IndexError):
    """
    An input index outside ``[0, input_count)`` was passed to eval or punc.

    Attributes:
        index: The offending index
        input_count: Size of the input domain of the PRF
    """

    def __init__(self, index: int, input_count: int):
        self.index = index
        self.input_count = input_count
        super().__init__(
            f"Input index {index} out of range for PRF with {input_count} inputs"
        )


class StateDecodeError(PprfError, ValueError):
    """A persisted PRF record failed validation on load."""
