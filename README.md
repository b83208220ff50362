# sgvm

Building blocks for a small dynamically typed scripting language: its
runtime values and operators, a label-based intermediate representation
with a pretty printer, a mark-and-sweep heap, and the `Console`, `Array`
and `Date` built-in namespaces.

## Modules

- `sgvm.operations` – the `BinOpType` and `UnaryOpType` enums, their
  symbols (`bin_op_to_string`, `unary_op_to_string`) and `InternalError`,
  raised when an impossible state is reached.
- `sgvm.values` – `Value`, `Object`, `NativeMethod`, `ValueType` and
  `ObjectType`; constructors such as `value_from_number` and
  `value_from_string`; `value_to_string`, `value_to_debug_string`,
  `value_is_truthy`, `values_are_equal` and `SgRuntimeError`, the error a
  running program reports to its user.
- `sgvm.valueops` – `bin_op(op, a, b)` and `unary_op(op, arg)`. String
  `+` concatenates, `==`/`!=` work on any values, other operators need
  numbers or booleans and raise `SgRuntimeError` otherwise. Division by
  zero gives an infinity or NaN; `%` of a negative dividend wraps to a
  positive remainder.
- `sgvm.ir` – the intermediate representation: `Variable`, `InstrCode`,
  `Instruction`, `Label`, `Block`, `Function` and `LabelIR`. A `Block`
  closes each label with a `GOTO` to the next one when it does not already
  end in one; label names are random 20-character strings drawn from
  `sgvm.utils.rng`.
- `sgvm.irlog` – text listings of instructions, blocks and a whole
  `LabelIR` (`format_instruction`, `format_block`, `format_ir`, and the
  `log_*` variants that write to standard output).
- `sgvm.heap` – `Heap`, which tracks objects created while a program runs
  and, on `collect(roots)`, drops every object not reachable from the given
  values (arrays are followed into their elements).
- `sgvm.natives.console`, `sgvm.natives.arrays`, `sgvm.natives.dates` –
  `create_console_namespace()` (`print`, `println`, `fg`/`bg` colour codes,
  `bold`, `underline`, `reset`), `create_array_namespace()` (`append`,
  `includes`, `length`) and `create_date_namespace()` (`timezoneName`).
- `sgvm.utils` and `sgvm.time_utils` – digit counting, subscript digits,
  string truncation, UTF-8 helpers, the shared random generator
  (`initialize_rng`), clock readings and the local time zone name.

## Installation

```
pip install .
```

## Example

```python
from sgvm.operations import BinOpType
from sgvm.valueops import bin_op
from sgvm.values import value_from_number, value_from_string, value_to_string

total = bin_op(BinOpType.ADD, value_from_number(2), value_from_number(3))
print(value_to_string(total))          # 5.000000

greeting = bin_op(BinOpType.ADD, value_from_string("hi "), value_from_string("there"))
print(value_to_string(greeting))       # hi there
```

Building and listing IR:

```python
from sgvm.ir import InstrCode, Instruction, LabelIR
from sgvm.irlog import log_ir
from sgvm.operations import BinOpType

ir = LabelIR()
block = ir.main.block
block.add_instruction(Instruction(InstrCode.NUMBER, 1))
block.add_instruction(Instruction(InstrCode.NUMBER, 2))
block.add_instruction(Instruction(InstrCode.BIN_OP, BinOpType.ADD))
block.add_instruction(Instruction(InstrCode.POP))
block.add_instruction(Instruction(InstrCode.EXIT))
log_ir(ir)
```

Calling a built-in function directly:

```python
from sgvm.natives.arrays import create_array_namespace
from sgvm.values import Object, ObjectType, value_from_number, value_from_object

array = value_from_object(Object(ObjectType.ARRAY, [value_from_number(1)]))
length = create_array_namespace().obj.data["length"].native
print(length.func([array], None).number)   # 1.0
```

## What the package does not do

It does not run programs. There is no compiler from source text, no
bytecode format, no translation from the IR to bytecode, no interpreter
loop and no command-line tool; nor is there a `Math` namespace or a
`clock` function. The built-in namespaces are plain values to be wired
into an interpreter by the caller; `Date.timezoneName` expects a runtime
object with an `add_object` method, such as one holding a `Heap`.

## Running the tests

```
pip install .[test]
pytest
```