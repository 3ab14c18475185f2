import itertools
from dataclasses import dataclass
from alphabet import Atom

@dataclass(frozen=True)
class S:
    def __repr__(self): return 's'

@dataclass(frozen=True)
class K:
    def __repr__(self): return 'k'

@dataclass(frozen=True)
class I:
    def __repr__(self): return 'i'

@dataclass(frozen=True)
class Sp:
    "S holding its first argument"
    x: any
    def __repr__(self): return f'`s{self.x!r}'

@dataclass(frozen=True)
class Kp:
    "K holding the value it will return"
    x: any
    def __repr__(self): return f'`k{self.x!r}'

@dataclass(frozen=True)
class Spp:
    "S holding two arguments, the third one fires it"
    x: any
    y: any
    def __repr__(self): return f'``s{self.x!r}{self.y!r}'

Ski = S | K | I | Sp | Kp | Spp

def lift(atom: Atom) -> Ski:
    match atom.name:
        case 's': return S()
        case 'k': return K()
        case 'i': return I()

def apply(f: Ski, x: Ski, tick=None) -> Ski:
    "f applied to x, reduced as far as the S, K, I rules go"
    if tick is not None:
        tick()

    match f:
        case S(): return Sp(x)
        case K(): return Kp(x)
        case I(): return x
        case Sp(g): return Spp(g, x)
        case Kp(g): return g
        case Spp(g, h): return apply(apply(g, x, tick), apply(h, x, tick), tick)
        case _: raise TypeError(f"{f!r} is not a combinator")

def saturated(f: Ski) -> bool:
    "Whether one more argument makes f fire a rule instead of just holding on to it"
    return isinstance(f, (I, Kp, Spp))

def length(f: Ski) -> int:
    match f:
        case Sp(x) | Kp(x): return 1 + length(x)
        case Spp(x, y): return 1 + length(x) + length(y)
        case _: return 1

if __name__ == '__main__':
    values = [S(), K(), I(), Sp(I()), Kp(S()), Spp(K(), Sp(K())), Spp(Kp(I()), I())]

    for x in values:
        assert apply(I(), x) == x

        for y in values:
            assert apply(apply(K(), x), y) == x

    # none of these duplicate their argument, so every S step terminates
    simple = [S(), K(), I(), Kp(S())]
    for x, y, z in itertools.product(simple, simple, values[:3]):
        assert apply(apply(apply(S(), x), y), z) == apply(apply(x, z), apply(y, z))

    assert repr(Spp(I(), Kp(S()))) == '``si`ks'
    assert apply(apply(apply(S(), I()), I()), I()) == I()
    assert length(Spp(Sp(K()), I())) == 4

    steps = []
    apply(Spp(I(), I()), K(), tick=lambda: steps.append(1))
    assert len(steps) == 4
