# sio

Building blocks for the sio language runtime: value types, native-function
environments for each rank, literal mapping, and a small latency-based link
selector.

## Modules

- **`sio.value`**: `Value` is a frozen dataclass. Its `kind` is a `ValueKind`
  (`UNIT`, `UNBOUND`, `BOOL`, `INTEGRAL`, `FUN`), and each kind carries a fixed-width
  descriptor text such as `"     int"`. Build values with `Value.unit()`,
  `Value.unbound()`, `Value.boolean(b)`, `Value.integral(n)` and
  `Value.make_fun(ValueFun(id))`. `Value.make_dummy()` returns a unit value.
  Integers are unsigned 64-bit, and a payload outside that range or of the
  wrong type is rejected when the value is built. `int()` returns the integer or
  raises `ValueKindUnexpected`. `conditional()` and `fun()` return the boolean or
  function held, or `None`. `structure()` and `index()` always return `None`.
  `GeneralValue`, `BrigadierValue`, `MajorValue` and `CorporalValue` are the
  rank-specific subclasses.
- **`sio.environ`**: `create_general_env()`, `create_brigadier_env()`,
  `create_major_env()` and `create_corporal_env()` each build an `Environment`
  holding the native functions `unbound`, `+`, `-`, `*`, `==`, `<=` and `neg`.
  - Look functions up with `Environment.get(path)` and list them with
    `Environment.names()`. An environment also supports `in`, `len()` and
    iteration. Binding a path twice raises `CompilationError`.
  - `Nif.call(args)` checks the argument count, except for the raw `unbound`
    function, which raises `UserPanic` if it is given any arguments.
  - Arithmetic that leaves the unsigned 64-bit range raises `UserPanic`.
    `neg` is bitwise complement.
  - Each rank has `<rank>_literal_mapper(span, lit)`, which turns a
    `CoreLiteral` into a `GeneralLiteral`, `BrigadierLiteral`, `MajorLiteral`
    or `CorporalLiteral`. Only `LiteralKind.BOOL` and `LiteralKind.NUMBER` are
    accepted; the other kinds raise `LiteralNotSupported`, and a malformed or
    out-of-range number raises `CompilationError`.
    `<rank>_literal_to_value(lit)` turns the literal into a value of that rank.
- **`sio.router`**: a `Link` records response times per public key with
  `update_history(public_key, response_time)` and keeps an empirical CDF for
  each key in `link.cdfs`. `sample_cdf(cdf)` draws from a CDF with a fixed seed.
  `estimate_expected_delay(cdf, num_samples)` averages that many draws.
  `select_best_link(links, public_key, num_samples)` returns the id of the link
  with the lowest expected delay for the key, or `None` if no link has seen
  that key.
- **`sio.errors`**: `ExecutionError`, with the subclasses `ValueKindUnexpected`
  and `UserPanic`, and `CompilationError`, with the subclass
  `LiteralNotSupported`.

## Installation

```
pip install .
```

## Usage

```python
from sio.environ import CoreLiteral, LiteralKind, Span
from sio.environ import create_general_env, general_literal_mapper, general_literal_to_value
from sio.value import GeneralValue

env = create_general_env()
plus = env.get("+")
result = plus.call([GeneralValue.integral(2), GeneralValue.integral(3)])
print(result.int())  # 5

lit = general_literal_mapper(Span(0, 2), CoreLiteral(LiteralKind.NUMBER, "42"))
print(general_literal_to_value(lit).int())  # 42
```

Routing:

```python
from sio.router import Link, select_best_link

links = {1: Link(), 2: Link()}
links[1].update_history("public_key_1", 1.0)
links[2].update_history("public_key_1", 3.0)
print(select_best_link(links, "public_key_1", 1000))  # 1
```

The `sio-router` command runs the link selection on built-in sample data. It
prints nothing and exits with status 0:

```
sio-router
```

## What this package does not do

There is no parser, compiler or execution machine here. The package cannot run
sio programs from source text. The environments provide the native functions
and the literal mapping that such a machine would use. The `sio-router` command
only selects a link from fixed sample data, and it does not report the result.

## Running the tests

```
pip install ".[test]"
pytest
```