from codebake.errors import DishError
from codebake.types.dish import DishData
from codebake.types.operation import ArgType, OperationArguments, OperationInfo


def take_bytes(args: OperationArguments, data: DishData) -> None:
    n = args.get_integer("n")
    if n < 0:
        raise DishError("amount to take must be nonnegative")
    data.value = data.as_bytes()[:n]


OPINFO_TAKE_BYTES = OperationInfo(
    name="take-bytes",
    description="takes the specified amount of bytes from the input and discards the rest",
    category="Utility",
    arguments=(("n", ArgType.INTEGER),),
    op=take_bytes,
)


def drop_bytes(args: OperationArguments, data: DishData) -> None:
    n = args.get_integer("n")
    if n < 0:
        raise DishError("integer must be nonnegative")
    data.value = data.as_bytes()[n:]


OPINFO_DROP_BYTES = OperationInfo(
    name="drop-bytes",
    description="drops the first `n` bytes from the input and leaves the rest",
    category="Utility",
    arguments=(("n", ArgType.INTEGER),),
    op=drop_bytes,
)
