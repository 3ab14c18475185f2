from blob import *
from alphabet import Apply, Token, token
from errors import LexiconError, NotEnoughAtoms, SurplusTokens

def scan(tokens) -> list[int]:
    "Running arity counter after each token: starts at 1, +1 on every ` and -1 on every atom"
    return list(islice(accumulate((1 if isinstance(t, Apply) else -1 for t in tokens), initial=1), 1, None))

def imbalance(counter: int):
    return NotEnoughAtoms() if counter > 0 else SurplusTokens()

class Sequence:
    "Tokens of a formula in prefix order, not necessarily well-formed"
    def __init__(self, tokens: Iterable[Token] = ()):
        self.tokens = deque(tokens)

    @classmethod
    def lex(cls, s: str) -> 'Sequence':
        tokens = deque()
        for ix, char in enumerate(s):
            if (t := token(char)) is None:
                raise LexiconError(ix, char)
            tokens.append(t)

        return cls(tokens)

    def isvalid(self):
        "Raise the FormulaError describing why this isn't a single formula"
        counters = scan(self.tokens)
        point = findfirst(lambda c: c == 0, counters)

        if point is not None and point < len(counters) - 1:
            raise SurplusTokens()

        if point is None:
            raise imbalance(counters[-1] if counters else 1)

    def validpoint(self) -> int:
        "Index of the token closing the formula that starts at the front"
        counters = scan(self.tokens)
        point = findfirst(lambda c: c == 0, counters)

        if point is None:
            raise imbalance(counters[-1] if counters else 1)

        return point

    def split(self, ix: int) -> tuple['Sequence', 'Sequence']:
        front = Sequence(islice(self.tokens, ix))
        back = Sequence(islice(self.tokens, ix, None))
        self.tokens.clear()
        return front, back

    def dequeue(self) -> Optional[Token]:
        return self.tokens.popleft() if self.tokens else None

    def pop(self) -> Optional[Token]:
        return self.tokens.pop() if self.tokens else None

    def join(self, seq: 'Sequence'):
        self.tokens.extend(seq.tokens)

    def __add__(self, seq: 'Sequence') -> 'Sequence':
        return Sequence(chain(self.tokens, seq.tokens))

    def __len__(self): return len(self.tokens)
    def __iter__(self): return iter(self.tokens)
    def __getitem__(self, ix): return self.tokens[ix]
    def __bool__(self): return bool(self.tokens)

    def __eq__(self, seq):
        return isinstance(seq, Sequence) and self.tokens == seq.tokens

    def __str__(self): return ''.join(map(str, self.tokens))
    def __repr__(self): return f'Sequence({str(self)!r})'

lex = Sequence.lex
