"""Exception types raised by the splitter."""


class InvalidArgumentError(ValueError):
    """Raised when a split, stream or chunk call is given invalid arguments.

    Always raised before any character of the input is processed.
    """

    pass
