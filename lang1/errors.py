class Lang1Error(Exception):
    """ Base class for all lang1 errors"""

    @property
    def kind(self) -> str:
        return type(self).__name__


class Lang1SyntaxError(Lang1Error):
    """ Raised when an input line cannot be parsed into one expression"""


class EmptyInput(Lang1SyntaxError):
    """ Raised when the input is empty or all whitespace"""


class UnmatchedOpenParen(Lang1SyntaxError):
    """ Raised when the input ends inside an open list"""


class UnmatchedCloseParen(Lang1SyntaxError):
    """ Raised when ')' appears outside of any list"""


class UnterminatedString(Lang1SyntaxError):
    """ Raised when a quoted string has no closing quote"""

    def __init__(self, message: str, remainder: str = ""):
        super().__init__(message)
        # Nothing is consumed: the remainder starts at the opening quote
        self.remainder = remainder


UnterminatedQuotedString = UnterminatedString


class TrailingInput(Lang1SyntaxError):
    """ Raised when text is left over after a complete expression"""

    def __init__(self, message: str, remainder: str = ""):
        super().__init__(message)
        self.remainder = remainder


class ArityError(Lang1Error):
    """ Raised for a malformed defn or a parameter/argument count mismatch"""


class TypeMismatch(Lang1Error):
    """ Raised when a primitive operator receives an operand of the wrong kind"""


class UnknownOperator(Lang1Error):
    """ Describes an application of something that is neither a primitive nor a closure.

    Never raised by the evaluator: apply wraps it in an Error value.
    """
