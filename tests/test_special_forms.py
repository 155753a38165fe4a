import pytest

from codebake import errors
from codebake.types.lambda_fn import Lambda
from codebake.types.symbol import Symbol


def test_def_returns_symbol_and_binds(interp):
    assert interp.parse_eval("(def a (- 112.4 12.2))") == Symbol("a")
    assert interp.parse_eval("a") == 100.2


def test_def_only_touches_innermost_frame(interp):
    interp.eval("(defn h (y) (def z y))")
    assert interp.parse_eval("(h 1)") == Symbol("z")
    with pytest.raises(errors.CodebakeUnboundSymbol):
        interp.parse_eval("z")


def test_def_in_lambda_does_not_overwrite_outer(interp):
    interp.eval("(def x 1) (defn f () (def x 2))")
    interp.parse_eval("(f)")
    assert interp.parse_eval("x") == 1.0


def test_if_selects_branch(interp):
    assert interp.parse_eval("(if true 1 2)") == 1.0
    assert interp.parse_eval("(if false 1 2)") == 2.0
    assert interp.parse_eval("(if (= 1 1) 'yes 'no)") == Symbol("yes")


def test_if_does_not_evaluate_other_branch(interp):
    assert interp.parse_eval("(if true 1 undefined-symbol)") == 1.0


def test_if_requires_boolean(interp):
    with pytest.raises(errors.CodebakeTypeError, match="boolean"):
        interp.parse_eval("(if 1 2 3)")
    with pytest.raises(errors.CodebakeTypeError):
        interp.parse_eval("(if '() 2 3)")


def test_fn_builds_lambda(interp):
    fn = interp.parse_eval("(fn (x) x)")
    assert isinstance(fn, Lambda)
    assert interp.parse_eval("((fn (x y) (- x y)) 5 3)") == 2.0


def test_defn_names_a_lambda(interp):
    assert interp.parse_eval("(defn double (x) (+ x x))") == Symbol("double")
    assert interp.parse_eval("(double 4)") == 8.0


def test_defn_allows_recursion(interp):
    interp.eval("(defn count-down (n) (if (= n 0) 'done (count-down (- n 1))))")
    assert interp.parse_eval("(count-down 10)") == Symbol("done")


def test_quote_returns_form_unevaluated(interp):
    assert interp.parse_eval("(quote a)") == Symbol("a")
    assert interp.parse_eval("(quote (1 2))") == [1.0, 2.0]
    assert interp.parse_eval("'(1 2 3)") == [1.0, 2.0, 3.0]
    assert interp.parse_eval("'(+ 1 2)") == [Symbol("+"), 1.0, 2.0]


def test_special_forms_cannot_be_shadowed(interp):
    interp.eval("(def if 5) (def quote 6)")
    assert interp.parse_eval("(if true 1 2)") == 1.0
    assert interp.parse_eval("(quote x)") == Symbol("x")


def test_lexical_scoping(interp):
    interp.eval("(def x 10) (defn f () x) (defn g (x) (f))")
    assert interp.parse_eval("(g 99)") == 10.0


def test_closure_outlives_call(interp):
    interp.eval("(defn make-adder (n) (fn (m) (+ n m))) (def add5 (make-adder 5))")
    assert interp.parse_eval("(add5 10)") == 15.0
    assert interp.parse_eval("(((fn (x) (fn (y) (+ x y))) 1) 2)") == 3.0


@pytest.mark.parametrize(
    "source",
    [
        "(if)",
        "(if true 1 2 3)",
        "(if true)",
        "(if false 1)",
        "(def)",
        "(def a)",
        "(def a 1 2)",
        "(fn)",
        "(fn (x))",
        "(fn (x) x x)",
        "(defn f)",
        "(defn f (x))",
        "(defn f (x) x x)",
        "(quote)",
        "(quote a b)",
    ],
)
def test_special_form_arity(interp, source):
    with pytest.raises(errors.CodebakeArityError):
        interp.parse_eval(source)


@pytest.mark.parametrize(
    "source",
    ["(def 1 2)", "(defn 1 (x) x)", "(fn x x)", "(fn (1) 1)", "(defn f (x 2) x)"],
)
def test_special_form_shapes(interp, source):
    with pytest.raises(errors.CodebakeTypeError):
        interp.parse_eval(source)
