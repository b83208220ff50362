"""Label-based intermediate representation produced by the compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator

from . import utils
from .operations import BinOpType, InternalError, UnaryOpType
from .values import (
    ObjectType,
    Value,
    ValueType,
    value_from_number,
    value_from_string,
)

# Below zero so it never collides with a real function index.
GLOBAL_FUNCTION_IND = -1

# Length of a generated label name.
IR_LABEL_LENGTH = 20

LABEL_CHARS = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "-_0123456789"
)

MAIN_FUNCTION_NAME = "[main]"


class VariableType(Enum):
    GLOBAL_CONSTANT = auto()
    GLOBAL_MUTABLE = auto()
    FUNCTION_CONSTANT = auto()
    FUNCTION_MUTABLE = auto()
    CLOSED_CONSTANT = auto()
    CLOSED_MUTABLE = auto()
    NATIVE = auto()


_VARIABLE_TYPE_NAMES = {
    VariableType.GLOBAL_CONSTANT: "const var",
    VariableType.GLOBAL_MUTABLE: "mut var",
    VariableType.FUNCTION_CONSTANT: "func mut var",
    VariableType.FUNCTION_MUTABLE: "func const var",
    VariableType.CLOSED_CONSTANT: "closed const var",
    VariableType.CLOSED_MUTABLE: "closed mut var",
    VariableType.NATIVE: "native",
}


def variable_type_to_string(var_type: VariableType) -> str:
    try:
        return _VARIABLE_TYPE_NAMES[var_type]
    except KeyError:
        raise InternalError("Unknown variable type in string function") from None


_CLOSED_TYPES = {
    VariableType.GLOBAL_CONSTANT: VariableType.CLOSED_CONSTANT,
    VariableType.FUNCTION_CONSTANT: VariableType.CLOSED_CONSTANT,
    VariableType.GLOBAL_MUTABLE: VariableType.CLOSED_MUTABLE,
    VariableType.FUNCTION_MUTABLE: VariableType.CLOSED_MUTABLE,
}


@dataclass(eq=False)
class Variable:
    """A named variable; ``function_ind`` is the function it belongs to."""

    name: str
    type: VariableType
    scope: int
    function_ind: int = GLOBAL_FUNCTION_IND

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        return (self.name, self.type, self.scope) == (other.name, other.type, other.scope)

    def __hash__(self) -> int:
        # The type is bound to name and scope, so it is left out of the hash.
        return hash((self.name, self.scope))

    def in_topmost_scope(self) -> bool:
        return self.scope == GLOBAL_FUNCTION_IND

    def is_global(self) -> bool:
        return self.type in (VariableType.GLOBAL_CONSTANT, VariableType.GLOBAL_MUTABLE)

    def is_local_function_var(self) -> bool:
        return self.type in (VariableType.FUNCTION_CONSTANT, VariableType.FUNCTION_MUTABLE)

    def close(self) -> None:
        """Mark the variable as captured by a closure."""
        try:
            self.type = _CLOSED_TYPES[self.type]
        except KeyError:
            raise InternalError("tried to close over invalid variable type") from None


class InstrCode(Enum):
    POP = auto()
    POP_JNZ = auto()
    POP_JIZ = auto()
    GOTO = auto()
    BIN_OP = auto()
    UNARY_OP = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()
    NUMBER = auto()
    STRING = auto()
    MAKE_ARRAY = auto()
    GET_ARRAY_VALUE = auto()
    SET_ARRAY_VALUE = auto()
    CONSTANT_PROPERTY_ACCESS = auto()
    GET_FUNCTION_REFERENCE = auto()
    MAKE_FUNCTION = auto()
    RETURN = auto()
    LOAD = auto()
    STORE = auto()
    CALL = auto()
    EXIT = auto()


_INSTR_NAMES = {
    InstrCode.POP: "POP",
    InstrCode.GOTO: "GOTO",
    InstrCode.POP_JIZ: "POP_JIZ",
    InstrCode.POP_JNZ: "POP_JNZ",
    InstrCode.BIN_OP: "BIN_OP",
    InstrCode.UNARY_OP: "UNARY_OP",
    InstrCode.TRUE: "INSTR_TRUE",
    InstrCode.FALSE: "INSTR_FALSE",
    InstrCode.NULL: "INSTR_NULL",
    InstrCode.NUMBER: "INSTR_NUMBER",
    InstrCode.STRING: "INSTR_STRING",
    InstrCode.MAKE_ARRAY: "INSTR_MAKE_ARRAY",
    InstrCode.GET_ARRAY_VALUE: "INSTR_GET_ARRAY_VALUE",
    InstrCode.SET_ARRAY_VALUE: "INSTR_SET_ARRAY_VALUE",
    InstrCode.CONSTANT_PROPERTY_ACCESS: "INSTR_CONSTANT_PROPERTY_ACCESS",
    InstrCode.GET_FUNCTION_REFERENCE: "GET_FUNCTION_REFERENCE",
    InstrCode.MAKE_FUNCTION: "MAKE_FUNCTION",
    InstrCode.RETURN: "RETURN",
    InstrCode.LOAD: "LOAD",
    InstrCode.STORE: "STORE",
    InstrCode.CALL: "CALL",
    InstrCode.EXIT: "EXIT",
}


def instr_type_to_string(code: InstrCode) -> str:
    try:
        return _INSTR_NAMES[code]
    except KeyError:
        raise InternalError("Tried to convert unknown instruction type to string") from None


_JUMP_CODES = frozenset({InstrCode.GOTO, InstrCode.POP_JIZ, InstrCode.POP_JNZ})
_CONSTANT_CODES = frozenset(
    {
        InstrCode.TRUE,
        InstrCode.FALSE,
        InstrCode.NULL,
        InstrCode.NUMBER,
        InstrCode.STRING,
        InstrCode.MAKE_ARRAY,
        InstrCode.GET_FUNCTION_REFERENCE,
    }
)


@dataclass
class Instruction:
    """One IR instruction; the meaning of ``payload`` depends on ``code``.

    Jumps hold a label name, STRING and CONSTANT_PROPERTY_ACCESS a string,
    BIN_OP and UNARY_OP an operator, NUMBER a float, CALL, MAKE_ARRAY and
    GET_FUNCTION_REFERENCE a count or index, LOAD and STORE a Variable.
    """

    code: InstrCode
    payload: Any = None

    def __post_init__(self) -> None:
        if self.code is InstrCode.NUMBER:
            self.payload = float(self.payload)

    def _expect(self, *codes: InstrCode) -> Any:
        if self.code not in codes:
            raise InternalError(f"Instruction {self.code.name} has no such payload")
        return self.payload

    @property
    def number(self) -> float:
        return self._expect(InstrCode.NUMBER)

    @property
    def address(self) -> str:
        return self._expect(*_JUMP_CODES)

    @property
    def bin_op(self) -> BinOpType:
        return self._expect(InstrCode.BIN_OP)

    @property
    def unary_op(self) -> UnaryOpType:
        return self._expect(InstrCode.UNARY_OP)

    @property
    def argument_count(self) -> int:
        return self._expect(InstrCode.CALL)

    @property
    def function_index(self) -> int:
        return self._expect(InstrCode.GET_FUNCTION_REFERENCE)

    @property
    def array_element_count(self) -> int:
        return self._expect(InstrCode.MAKE_ARRAY)

    @property
    def variable(self) -> Variable:
        return self._expect(InstrCode.LOAD, InstrCode.STORE)

    @property
    def string(self) -> str:
        return self._expect(InstrCode.STRING, InstrCode.CONSTANT_PROPERTY_ACCESS)

    def is_truthy_constant(self) -> bool:
        return (
            self.code in (InstrCode.TRUE, InstrCode.FALSE)
            or (self.code is InstrCode.NUMBER and self.payload != 0)
        )

    def is_constant(self) -> bool:
        return self.code in _CONSTANT_CODES

    def is_static_flow_load(self) -> bool:
        """Whether this instruction only pushes a value without side effects."""
        return self.code is InstrCode.LOAD or self.is_constant()

    def is_jump(self) -> bool:
        return self.code in _JUMP_CODES

    def payload_to_value(self) -> Value:
        """Turn a constant-loading instruction into a fresh runtime value."""
        code = self.code
        if code is InstrCode.NUMBER:
            return value_from_number(self.payload)
        if code is InstrCode.TRUE:
            return Value(ValueType.TRUE)
        if code is InstrCode.FALSE:
            return Value(ValueType.FALSE)
        if code is InstrCode.NULL:
            return Value(ValueType.NULL_VALUE)
        if code in (InstrCode.STRING, InstrCode.CONSTANT_PROPERTY_ACCESS):
            return value_from_string(self.payload)
        if code is InstrCode.GET_FUNCTION_REFERENCE:
            return Value(ValueType.PROGRAM_FUNCTION, self.payload)
        raise InternalError(
            "Tried to convert instruction payload to value that could not become a value"
        )

    @staticmethod
    def value_to_instruction(value: Value) -> "Instruction":
        """Build the instruction that loads ``value`` onto the stack."""
        vt = value.type
        if vt is ValueType.OBJ:
            obj = value.obj
            if obj.type is ObjectType.STRING:
                return Instruction(InstrCode.STRING, obj.data)
            raise InternalError("Optimization tried to condense array when it shouldn't have")
        if vt is ValueType.NUMBER:
            return Instruction(InstrCode.NUMBER, value.number)
        if vt is ValueType.TRUE:
            return Instruction(InstrCode.TRUE)
        if vt is ValueType.FALSE:
            return Instruction(InstrCode.FALSE)
        raise InternalError("Tried to convert instruction to a value that could not become a value")


@dataclass
class Label:
    name: str
    instructions: list[Instruction] = field(default_factory=list)


class Block:
    """An ordered list of labels; every label but the last ends in a jump."""

    def __init__(self) -> None:
        self.labels: list[Label] = []

    def __iter__(self) -> Iterator[Label]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, index: int) -> Label:
        return self.labels[index]

    def gen_label_name(self) -> str:
        """Generate a random label name; collisions are possible but vanishingly rare."""
        return "".join(utils.rng.choice(LABEL_CHARS) for _ in range(IR_LABEL_LENGTH))

    def new_label(self, name: str | None = None) -> str:
        """Start a new label, ending the previous one with a GOTO if needed."""
        if name is None:
            name = self.gen_label_name()
        if self.labels:
            last = self.labels[-1].instructions
            if not last or last[-1].code is not InstrCode.GOTO:
                last.append(Instruction(InstrCode.GOTO, name))
        self.labels.append(Label(name))
        return name

    def add_instruction(self, instruction: Instruction) -> None:
        """Append to the last label, creating one if there is none."""
        if not self.labels:
            self.new_label()
        self.labels[-1].instructions.append(instruction)


@dataclass
class Function:
    name: str
    block: Block = field(default_factory=Block)
    arguments: list[Variable] = field(default_factory=list)

    def add_argument(self, argument: Variable) -> None:
        self.arguments.append(argument)


class LabelIR:
    """The main program block and every function defined in it."""

    def __init__(self) -> None:
        self.main = Function(MAIN_FUNCTION_NAME)
        self.functions: list[Function] = []

    def new_function(self, name: str) -> Function:
        function = Function(name)
        self.functions.append(function)
        return function

    def last_function_index(self) -> int:
        return len(self.functions) - 1 if self.functions else GLOBAL_FUNCTION_IND

    def get_function(self, index: int) -> Function:
        if index < 0:
            raise IndexError(f"No function at index {index}")
        return self.functions[index]