from dataclasses import dataclass

@dataclass(frozen=True)
class Apply:
    "` joins the function and the argument that follow it"
    def __repr__(self): return '`'
    def __str__(self): return '`'

@dataclass(frozen=True)
class Atom:
    name: str

    def __post_init__(self):
        if self.name not in ATOMS:
            raise ValueError(f"{self.name!r} is not one of s, k, i")

    def __repr__(self): return self.name
    def __str__(self): return self.name

ATOMS = ('s', 'k', 'i')

a = Apply()
s = Atom('s')
k = Atom('k')
i = Atom('i')

Token = Apply | Atom

TOKENS = {'`': a, 's': s, 'k': k, 'i': i}

def token(char: str):
    return TOKENS.get(char)

def arity(t: Token) -> int:
    return 2 if isinstance(t, Apply) else 0
