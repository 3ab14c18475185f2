from blob import *
from alphabet import Atom
from errors import NotEnoughAtoms, SurplusTokens, StepLimitExceeded
from sequence import Sequence, lex
from formula import lower, serialize
from ski import Ski, apply, lift, saturated

MODES = ('direct', 'requeue')

def render(f: Ski) -> str:
    return str(serialize(lower(f)))

class Stax:
    """
    Stack machine reducing a formula from its last token backwards.

    Atoms are pushed as combinator values, every ` applies the top of the
    stack (the function) to the value under it (the argument). In 'direct'
    mode the result goes back onto the stack, in 'requeue' mode the result
    of a firing rule is written back as tokens at the end of the program,
    so that it gets read again like any other part of the input.
    """
    def __init__(self, program: Sequence, mode='direct', limit=None, trace=False, progress=False):
        if mode not in MODES:
            raise ValueError(f"mode should be one of {MODES}, not {mode!r}")

        self.program = Sequence(program)
        self.stack: list[Ski] = []
        self.mode = mode
        self.limit = limit
        self.trace = trace
        self.progress = progress
        self.steps = 0
        self.tbar = None

    def tick(self):
        if self.limit is not None and self.steps >= self.limit:
            raise StepLimitExceeded(self.limit)

        self.steps += 1
        if self.tbar is not None:
            self.tbar.update()

    def pop(self) -> Ski:
        if not self.stack:
            raise NotEnoughAtoms()

        return self.stack.pop()

    def step(self, t):
        if isinstance(t, Atom):
            self.stack.append(lift(t))
            return

        function = self.pop()
        argument = self.pop()
        result = apply(function, argument, self.tick)

        if self.trace:
            console.print(f'[dim]{self.steps:>6}[/dim] `{render(function)}{render(argument)} -> {render(result)}')

        if self.mode == 'requeue' and saturated(function):
            self.program.join(serialize(lower(result)))
        else:
            self.stack.append(result)

    def eval(self) -> Sequence:
        with tqdm(disable=not self.progress, unit='step', desc='reducing') as self.tbar:
            while (t := self.program.pop()) is not None:
                self.step(t)

        if not self.stack:
            raise NotEnoughAtoms()

        if len(self.stack) > 1:
            raise SurplusTokens()

        return serialize(lower(self.stack.pop()))

def evaluate(string: str, **options) -> str:
    "Reduce a formula given as a string, answering with the string of its value"
    seq = lex(string)
    seq.isvalid()
    return str(Stax(seq, **options).eval())
