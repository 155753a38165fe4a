import pytest
from hypothesis import given, strategies as st

from codebake.errors import CodebakeError, DishError
from codebake.ops import OPERATIONS
from codebake.ops.data_format import from_base64
from codebake.types.dish import Dish, DishData
from codebake.types.operation import EMPTY_ARGS, OperationArguments

ZERO_ARG_OPERATIONS = [info for info in OPERATIONS if info.arity == 0]


def upper(args, data):
    data.value = data.value.upper()


def boom(args, data):
    raise DishError("boom")


def test_apply_mutates_in_place():
    d = Dish.from_string("abc")
    assert d.apply(upper, EMPTY_ARGS) is d
    assert d.data == DishData("ABC")


def test_failure_preserves_message():
    d = Dish.from_string("abc")
    d.apply(boom, EMPTY_ARGS)
    assert not d.is_success
    assert d.data is None
    assert d.error.message == "boom"
    assert str(d) == "error: dish error: boom"


def test_failure_is_sticky():
    d = Dish.from_string("abc")
    d.apply(boom, EMPTY_ARGS)
    d.apply(upper, EMPTY_ARGS)
    assert not d.is_success
    assert d.error.message == "boom"


@given(st.lists(st.sampled_from(ZERO_ARG_OPERATIONS), max_size=8))
def test_failed_dish_ignores_any_later_operation(steps):
    d = Dish.from_string("this is not base64 !")
    d.apply(from_base64, EMPTY_ARGS)
    message = d.error.message
    for info in steps:
        d.apply(info.op, EMPTY_ARGS)
    assert not d.is_success
    assert d.error.message == message


def test_reentrant_apply_fails_fast():
    d = Dish.from_string("abc")

    def reenter(args, data):
        d.apply(upper, EMPTY_ARGS)

    with pytest.raises(CodebakeError, match="already borrowed"):
        d.apply(reenter, EMPTY_ARGS)
    # the borrow is released once the outer apply unwinds
    d.apply(upper, EMPTY_ARGS)
    assert d.data.value == "ABC"


def test_dish_equality():
    assert Dish.from_string("lorgol") == Dish.from_string("lorgol")
    assert Dish.from_string("lorgol") != Dish.from_string("shumgobbler")
    assert Dish.from_bytes(b"a") == Dish.from_bytes(b"a")
    assert Dish.from_string("a") != Dish.from_bytes(b"a")


def test_failed_dishes_are_never_equal():
    failed = Dish.from_string("abc")
    failed.apply(boom, EMPTY_ARGS)
    other = Dish.from_string("abc")
    other.apply(boom, EMPTY_ARGS)
    assert not failed == other
    assert not failed == failed
    assert not failed == Dish.from_string("abc")


def test_dish_display():
    assert str(Dish.from_string("hello")) == "Dish(hello)"
    assert str(Dish.from_bytes(b"hi\xff")) == "Dish(hi\ufffd)"


def test_dish_holds_exactly_one_state():
    with pytest.raises(ValueError):
        Dish()
    with pytest.raises(ValueError):
        Dish(data=DishData("a"), error=DishError("b"))


def test_operation_arguments_are_checked():
    args = OperationArguments({"n": 3, "pattern": "a+"})
    assert args.get_integer("n") == 3
    assert args.get_string("pattern") == "a+"
    assert "n" in args and len(args) == 2
    with pytest.raises(DishError):
        args.get_integer("missing")
    with pytest.raises(DishError):
        args.get_integer("pattern")
    with pytest.raises(DishError):
        args.get_string("n")
