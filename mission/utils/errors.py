# IN THIS FILE: PARSE ERRORS raised while turning raw text into domain values


class ParseError(ValueError):
    """
    Raised when a raw text token cannot be turned into a domain value.

    Attributes:
        reason: human readable explanation, built from the offending token
        token:  the raw token that failed to parse
    """

    kind = "ParseError"

    def __init__(self, reason: str, token: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.token = token

    def __repr__(self) -> str:
        return f"{self.kind}({self.reason!r})"


class InvalidGrid(ParseError):
    kind = "InvalidGrid"


class InvalidVehicle(ParseError):
    kind = "InvalidVehicle"


class InvalidCommand(ParseError):
    kind = "InvalidCommand"
