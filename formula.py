from dataclasses import dataclass
from alphabet import Atom, a, s, k, i
from sequence import Sequence, lex
from ski import S, K, I, Sp, Kp, Spp, Ski

@dataclass(frozen=True)
class Leaf:
    atom: Atom
    def __repr__(self): return repr(self.atom)

@dataclass(frozen=True)
class App:
    function: any
    argument: any
    def __repr__(self): return str(serialize(self))

Ast = Leaf | App

# trees get as deep as formulas are long, so nothing here recurses on them

def parse(seq: Sequence) -> Ast:
    "Build the tree of a well-formed sequence, leaving the sequence untouched"
    seq = Sequence(seq)
    seq.isvalid()

    # None marks an App waiting for its function and argument on `done`
    todo, done = [seq], []
    while todo:
        match todo.pop():
            case None:
                argument = done.pop()
                done.append(App(done.pop(), argument))
            case part:
                match part.dequeue():
                    case Atom() as atom:
                        done.append(Leaf(atom))
                    case _:
                        # both halves of a valid formula are valid formulas
                        function, argument = part.split(part.validpoint() + 1)
                        todo += [None, argument, function]

    return done.pop()

def fromstring(string: str) -> Ast:
    return parse(lex(string))

def serialize(ast: Ast) -> Sequence:
    seq = Sequence()
    stack = [ast]
    # pre-order: a node, then its function, then its argument
    while stack:
        match stack.pop():
            case Leaf(atom):
                seq.tokens.append(atom)
            case App(f, x):
                seq.tokens.append(a)
                stack.append(x)
                stack.append(f)

    return seq

def lower(f: Ski) -> Ast:
    "Tree of the term a combinator value stands for"
    # a Leaf on `todo` is a head waiting for its argument, None joins the top two trees
    todo, done = [f], []
    while todo:
        match todo.pop():
            case S(): done.append(Leaf(s))
            case K(): done.append(Leaf(k))
            case I(): done.append(Leaf(i))
            case Sp(x): todo += [Leaf(s), x]
            case Kp(x): todo += [Leaf(k), x]
            case Spp(x, y): todo += [None, y, Leaf(s), x]
            case Leaf() as head:
                done.append(App(head, done.pop()))
            case None:
                argument = done.pop()
                done.append(App(done.pop(), argument))

    return done.pop()

def depth(ast: Ast) -> int:
    deepest = 0
    todo = [(ast, 0)]
    while todo:
        node, d = todo.pop()
        deepest = max(deepest, d)
        if isinstance(node, App):
            todo += [(node.function, d + 1), (node.argument, d + 1)]

    return deepest

def size(ast: Ast) -> int:
    return len(serialize(ast))
