"""core/errors.py - error taxonomy shared by the three pipeline stages"""


class EvaluationError(Exception):
    """Base class for every failure while evaluating one expression"""

    stage = "evaluation"

    def __init__(self, reason, column=None, text=None):
        self.reason = reason
        self.column = column
        self.text = text
        super().__init__(self._format())

    def _format(self):
        message = f"{self.stage.capitalize()} error: {self.reason}"
        if self.text is not None and self.column is not None:
            message += f" ('{self.text}' at column {self.column})"
        elif self.column is not None:
            message += f" (at column {self.column})"
        elif self.text is not None:
            message += f" ('{self.text}')"
        return message


class LexError(EvaluationError):
    """Unrecognized character, malformed numeral or unknown identifier"""

    stage = "lex"


class ParseError(EvaluationError):
    """Mismatched parentheses, misplaced separator or bad function call"""

    stage = "parse"


class EvalError(EvaluationError):
    """Operand stack underflow or a final stack that does not hold one value"""

    stage = "eval"
