class InvalidFormula(ValueError):
    "Input that is not a formula of the calculus"

class LexiconError(InvalidFormula):
    "A character outside of {`, s, k, i}"
    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(f'unexpected {char!r} at position {position}')

class FormulaError(InvalidFormula):
    "Applications and atoms don't pair up"
    message = 'malformed formula'

    def __init__(self, message=None):
        super().__init__(message or self.message)

class NotEnoughAtoms(FormulaError):
    message = 'not enough atoms: an application is missing its function or argument'

class SurplusTokens(FormulaError):
    message = 'surplus tokens: left over after the formula is complete'

class StepLimitExceeded(RuntimeError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f'gave up after {limit} reduction steps')
