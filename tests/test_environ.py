import pytest

from sio.environ import (
    BrigadierLiteral,
    CoreLiteral,
    CorporalLiteral,
    Environment,
    GeneralLiteral,
    LiteralKind,
    MajorLiteral,
    Nif,
    Span,
    brigadier_literal_mapper,
    brigadier_literal_to_value,
    corporal_literal_mapper,
    corporal_literal_to_value,
    create_brigadier_env,
    create_corporal_env,
    create_general_env,
    create_major_env,
    general_literal_mapper,
    general_literal_to_value,
    major_literal_mapper,
    major_literal_to_value,
)
from sio.errors import (
    CompilationError,
    ExecutionError,
    LiteralNotSupported,
    UserPanic,
    ValueKindUnexpected,
)
from sio.value import (
    BOOL_KIND,
    INT_KIND,
    VALUE_INT_MAX,
    BrigadierValue,
    CorporalValue,
    GeneralValue,
    MajorValue,
)

SPAN = Span(0, 4)

RANKS = [
    (general_literal_mapper, general_literal_to_value, create_general_env, GeneralLiteral, GeneralValue),
    (brigadier_literal_mapper, brigadier_literal_to_value, create_brigadier_env, BrigadierLiteral, BrigadierValue),
    (major_literal_mapper, major_literal_to_value, create_major_env, MajorLiteral, MajorValue),
    (corporal_literal_mapper, corporal_literal_to_value, create_corporal_env, CorporalLiteral, CorporalValue),
]

NIF_NAMES = ["unbound", "+", "-", "*", "==", "<=", "neg"]


@pytest.mark.parametrize("mapper,to_value,create_env,lit_cls,val_cls", RANKS)
def test_bool_literal_only_true_is_true(mapper, to_value, create_env, lit_cls, val_cls):
    assert mapper(SPAN, CoreLiteral(LiteralKind.BOOL, "true")) == lit_cls(True)
    assert mapper(SPAN, CoreLiteral(LiteralKind.BOOL, "false")) == lit_cls(False)
    assert mapper(SPAN, CoreLiteral(LiteralKind.BOOL, "True")) == lit_cls(False)


@pytest.mark.parametrize("mapper,to_value,create_env,lit_cls,val_cls", RANKS)
def test_number_literal_round_trip(mapper, to_value, create_env, lit_cls, val_cls):
    lit = mapper(SPAN, CoreLiteral(LiteralKind.NUMBER, "42"))
    assert lit == lit_cls(42)
    value = to_value(lit)
    assert value == val_cls.integral(42)
    assert type(value) is val_cls


@pytest.mark.parametrize("mapper,to_value,create_env,lit_cls,val_cls", RANKS)
def test_bool_literal_to_value(mapper, to_value, create_env, lit_cls, val_cls):
    value = to_value(mapper(SPAN, CoreLiteral(LiteralKind.BOOL, "true")))
    assert value.conditional() is True
    assert value.descriptor() == BOOL_KIND


def test_number_literal_limits():
    lit = general_literal_mapper(SPAN, CoreLiteral(LiteralKind.NUMBER, str(VALUE_INT_MAX)))
    assert lit.value == VALUE_INT_MAX
    with pytest.raises(CompilationError):
        general_literal_mapper(SPAN, CoreLiteral(LiteralKind.NUMBER, str(VALUE_INT_MAX + 1)))


@pytest.mark.parametrize("text", ["-1", "", "1_000", " 7", "0x10"])
def test_invalid_number_literal(text):
    with pytest.raises(CompilationError):
        major_literal_mapper(SPAN, CoreLiteral(LiteralKind.NUMBER, text))


@pytest.mark.parametrize(
    "lit",
    [
        CoreLiteral(LiteralKind.STRING, "hello"),
        CoreLiteral(LiteralKind.DECIMAL, "1.5"),
        CoreLiteral(LiteralKind.BYTES, b"\x00"),
    ],
)
def test_unsupported_literals(lit):
    with pytest.raises(LiteralNotSupported) as info:
        corporal_literal_mapper(SPAN, lit)
    assert info.value.span == SPAN
    assert info.value.literal == lit


def test_literals_of_different_ranks_differ():
    assert GeneralLiteral(1) != MajorLiteral(1)
    assert GeneralLiteral(True) != GeneralLiteral(1) or GeneralLiteral(True).is_bool
    assert GeneralLiteral(True).is_bool and not GeneralLiteral(1).is_bool


@pytest.mark.parametrize("mapper,to_value,create_env,lit_cls,val_cls", RANKS)
def test_env_names(mapper, to_value, create_env, lit_cls, val_cls):
    env = create_env()
    assert env.names() == NIF_NAMES
    assert env.names() == create_general_env().names()
    assert env.get("neg").arity == 1
    assert env.get("unbound").arity == 0
    assert env.get("missing") is None


@pytest.mark.parametrize("mapper,to_value,create_env,lit_cls,val_cls", RANKS)
def test_arithmetic(mapper, to_value, create_env, lit_cls, val_cls):
    env = create_env()
    a, b = val_cls.integral(7), val_cls.integral(3)
    assert env.get("+").call([a, b]) == val_cls.integral(10)
    assert env.get("-").call([a, b]) == val_cls.integral(4)
    assert env.get("*").call([a, b]) == val_cls.integral(21)
    assert type(env.get("+").call([a, b])) is val_cls
    general = create_general_env()
    assert general.get("+").call(
        [GeneralValue.integral(7), GeneralValue.integral(3)]
    ) == GeneralValue.integral(10)


@pytest.mark.parametrize("mapper,to_value,create_env,lit_cls,val_cls", RANKS)
def test_comparisons(mapper, to_value, create_env, lit_cls, val_cls):
    env = create_env()
    a, b = val_cls.integral(2), val_cls.integral(5)
    assert env.get("==").call([a, a]) == val_cls.boolean(True)
    assert env.get("==").call([a, b]) == val_cls.boolean(False)
    assert env.get("<=").call([a, b]) == val_cls.boolean(True)
    assert env.get("<=").call([b, a]) == val_cls.boolean(False)
    assert env.get("<=").call([a, a]) == val_cls.boolean(True)
    general = create_general_env()
    assert general.get("<=").call(
        [GeneralValue.integral(5), GeneralValue.integral(2)]
    ) == GeneralValue.boolean(False)


def test_neg_is_bitwise_not():
    env = create_general_env()
    neg = env.get("neg")
    assert neg.call([GeneralValue.integral(0)]) == GeneralValue.integral(VALUE_INT_MAX)
    once = neg.call([GeneralValue.integral(12345)])
    assert neg.call([once]) == GeneralValue.integral(12345)


def test_unbound():
    env = create_major_env()
    assert env.get("unbound").call([]) == MajorValue.unbound()
    with pytest.raises(UserPanic) as info:
        env.get("unbound").call([MajorValue.integral(1)])
    assert info.value.message == "`nil' function does not need any arguments"


def test_wrong_kind_argument():
    env = create_brigadier_env()
    with pytest.raises(ValueKindUnexpected) as info:
        env.get("+").call([BrigadierValue.boolean(True), BrigadierValue.integral(1)])
    assert info.value.value_expected == INT_KIND
    assert info.value.value_got == BOOL_KIND


def test_wrong_arity():
    env = create_corporal_env()
    with pytest.raises(ExecutionError):
        env.get("+").call([CorporalValue.integral(1)])


@pytest.mark.parametrize(
    "name,a,b",
    [("+", VALUE_INT_MAX, 1), ("-", 0, 1), ("*", VALUE_INT_MAX, 2)],
)
def test_overflow_raises(name, a, b):
    env = create_general_env()
    with pytest.raises(UserPanic):
        env.get(name).call([GeneralValue.integral(a), GeneralValue.integral(b)])


def test_environment_rejects_duplicate():
    env = Environment(GeneralValue)
    nif = Nif("unit", 0, lambda args: GeneralValue.unit())
    env.add_nif("unit", nif)
    with pytest.raises(CompilationError):
        env.add_nif("unit", nif)
    assert len(env) == 1
    assert "unit" in env
    assert env.get("unit").call([]) == GeneralValue.unit()
    assert list(env) == ["unit"]


def test_rank_literal_range_checked():
    with pytest.raises(ValueError):
        GeneralLiteral(VALUE_INT_MAX + 1)
    with pytest.raises(ValueError):
        GeneralLiteral(-1)
    with pytest.raises(TypeError):
        GeneralLiteral("1")
    assert hash(MajorLiteral(5)) == hash(MajorLiteral(5))