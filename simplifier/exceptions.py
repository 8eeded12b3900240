# simplifier/exceptions.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Exceptions raised by the simplification entry points


class SimplificationError(RuntimeError):
    """Raised when text given to a simplification entry point cannot be parsed.

    The message starts with ``Error simplifying expression:`` (or
    ``Error simplifying LaTeX expression:``) followed by the parse error; the
    original ``ParseError`` is chained as ``__cause__``.
    """

    pass
