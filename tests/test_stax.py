import pytest

from alphabet import a, s
from errors import LexiconError, NotEnoughAtoms, SurplusTokens, StepLimitExceeded
from sequence import Sequence, lex
from ski import S, K, I, Sp, Kp
from stax import Stax, evaluate

OMEGA = "```sii``sii"

SCENARIOS = [
    ("i", "i"),
    ("`si", "`si"),
    ("`ki", "`ki"),
    ("``kii", "i"),
    ("```siii", "i"),
    ("```s``kii```skiis", "`ss"),
    ("```skss", "s"),
    ("```s`kskk", "`s`kk"),
    ("`k``sii", "`k``sii"),
]


@pytest.mark.parametrize("mode", ["direct", "requeue"])
@pytest.mark.parametrize("formula,result", SCENARIOS)
def test_evaluate(formula, result, mode):
    assert evaluate(formula, mode=mode) == result


def test_eval_returns_sequence():
    stax = Stax(lex("```s``kii```skiis"))
    assert stax.eval() == lex("`ss")


def test_program_is_copied():
    program = lex("``kii")
    Stax(program).eval()
    assert program == lex("``kii")


@pytest.mark.parametrize("formula,error", [
    ("`s", NotEnoughAtoms),
    ("sk", SurplusTokens),
    ("", NotEnoughAtoms),
    ("ik`", SurplusTokens),
])
def test_evaluate_errors(formula, error):
    with pytest.raises(error):
        evaluate(formula)


def test_evaluate_lexicon_error():
    with pytest.raises(LexiconError) as e:
        evaluate("`sx")

    assert e.value.position == 2


@pytest.mark.parametrize("formula,error", [
    ("`s", NotEnoughAtoms),
    ("sk", SurplusTokens),
    ("", NotEnoughAtoms),
    ("`", NotEnoughAtoms),
])
def test_unvalidated_program_errors(formula, error):
    with pytest.raises(error):
        Stax(lex(formula)).eval()


def test_steps():
    stax = Stax(lex("``kii"))
    stax.eval()
    assert stax.steps == 2

    stax = Stax(lex("```siii"))
    stax.eval()
    assert stax.steps == 6


def test_limit():
    assert evaluate("```siii", limit=6) == "i"

    with pytest.raises(StepLimitExceeded) as e:
        evaluate("```siii", limit=5)

    assert e.value.limit == 5


@pytest.mark.parametrize("mode", ["direct", "requeue"])
def test_limit_stops_divergence(mode):
    with pytest.raises(StepLimitExceeded):
        evaluate(OMEGA, mode=mode, limit=300)


def test_requeue_writes_fired_results_back():
    stax = Stax(Sequence(), mode='requeue')
    stax.stack = [I(), Kp(Sp(K()))]
    stax.step(a)
    assert stax.program == lex("`sk")
    assert stax.stack == []

    stax.step(stax.program.pop())
    assert stax.stack == [K()]


def test_requeue_keeps_partial_values():
    stax = Stax(Sequence(), mode='requeue')
    stax.stack = [I(), S()]
    stax.step(a)
    assert stax.program == Sequence()
    assert stax.stack == [Sp(I())]


def test_direct_pushes_results():
    stax = Stax(Sequence())
    stax.stack = [I(), Kp(Sp(K()))]
    stax.step(a)
    assert stax.stack == [Sp(K())]

    stax.step(s)
    assert stax.stack == [Sp(K()), S()]


def test_bad_mode():
    with pytest.raises(ValueError):
        Stax(lex("i"), mode='lazy')


def test_trace(capsys):
    evaluate("``kii", trace=True)
    err = capsys.readouterr().err
    assert "`ki -> `ki" in err
    assert "``kii -> i" in err


@pytest.mark.parametrize("mode", ["direct", "requeue"])
def test_deep_formulas(mode):
    held = "`k" * 5000 + "i"
    assert evaluate(held, mode=mode) == held
    assert evaluate("`i" * 5000 + "k", mode=mode) == "k"
    assert evaluate("`" * 5000 + "k" + "i" * 5000, mode=mode) == "i"


def test_progress(capsys):
    assert evaluate("```siii", progress=True) == "i"
    err = capsys.readouterr().err
    assert "reducing" in err
    assert "6step" in err
