"""Readable listings of the label intermediate representation."""

from __future__ import annotations

import sys

from .ir import (
    IR_LABEL_LENGTH,
    Block,
    InstrCode,
    Instruction,
    LabelIR,
    instr_type_to_string,
    variable_type_to_string,
)
from .operations import bin_op_to_string, unary_op_to_string
from .utils import (
    get_digits,
    get_string_length_as_utf32,
    truncate_string,
    var_ind_to_subscript,
)
from .values import format_number

# Width of the column holding the instruction name.
INSTRUCTION_NAME_LENGTH = 35
# Width given to the argument before a comment starts.
ARGUMENT_SPACE = IR_LABEL_LENGTH + 5
# Longest string or variable name shown in an argument.
MAX_STRING_LENGTH = 20

RULE = "-" * 55
NUMBER_TYPE_NAME = "double"

_JUMPS = frozenset({InstrCode.GOTO, InstrCode.POP_JIZ, InstrCode.POP_JNZ})


def _argument_and_comment(instr: Instruction) -> tuple[str, str]:
    code = instr.code
    if code in _JUMPS:
        return ".L" + instr.address, ""
    if code is InstrCode.BIN_OP:
        op = instr.bin_op
        return f"{int(op)} ({bin_op_to_string(op)})", ""
    if code is InstrCode.UNARY_OP:
        op = instr.unary_op
        return f"{int(op)} ({unary_op_to_string(op)})", ""
    if code is InstrCode.NUMBER:
        return format_number(instr.number), f"[type={NUMBER_TYPE_NAME}]"
    if code is InstrCode.STRING:
        value = instr.string
        argument = '"' + truncate_string(value, MAX_STRING_LENGTH) + '"'
        return argument, f"length=({len(value)})"
    if code is InstrCode.MAKE_ARRAY:
        count = instr.array_element_count
        return str(count), f"[#elements={count}]"
    if code is InstrCode.CONSTANT_PROPERTY_ACCESS:
        return instr.string, ""
    if code is InstrCode.GET_FUNCTION_REFERENCE:
        return str(instr.function_index), ""
    if code in (InstrCode.LOAD, InstrCode.STORE):
        variable = instr.variable
        argument = truncate_string(variable.name, MAX_STRING_LENGTH)
        argument += var_ind_to_subscript(variable.scope)
        comment = (
            f"({variable_type_to_string(variable.type)}, "
            f"function_scope = {variable.function_ind})"
        )
        return argument, comment
    if code is InstrCode.CALL:
        return str(instr.argument_count), ""
    return "", ""


def format_instruction(instr: Instruction) -> str:
    """Render one instruction as a single line without a trailing newline."""
    name = instr_type_to_string(instr.code) + " "
    text = name.ljust(INSTRUCTION_NAME_LENGTH)

    argument, comment = _argument_and_comment(instr)
    text += argument
    if comment:
        if len(argument.encode("utf-8")) < ARGUMENT_SPACE:
            text += " " * max(0, ARGUMENT_SPACE - get_string_length_as_utf32(argument))
        text += "; " + comment
    return text


def log_instruction(instr: Instruction) -> None:
    """Write one instruction line to standard output."""
    sys.stdout.write(format_instruction(instr) + "\n")


def format_block(block: Block) -> str:
    """Render every label of a block with numbered instructions."""
    total = sum(len(label.instructions) for label in block)
    width = get_digits(total)

    parts = []
    number = 0
    for label in block:
        parts.append(f"\n.L{label.name}:\n")
        for instr in label.instructions:
            prefix = " " * (width - get_digits(number)) + f"  {number} |  "
            parts.append(prefix + format_instruction(instr) + "\n")
            number += 1
    return "".join(parts)


def log_block(block: Block) -> None:
    """Write the listing of a block to standard output."""
    sys.stdout.write(format_block(block))


def format_ir(ir: LabelIR) -> str:
    """Render the main block and every function of the IR."""
    parts = [
        RULE + "\n",
        "                          IR\n",
        "                       =>MAIN<=\n",
        format_block(ir.main.block),
    ]
    for index, function in enumerate(ir.functions):
        parts.append(RULE + "\n")
        parts.append("\n")
        parts.append(f"                       Function 0x{index:x}\n")
        parts.append(format_block(function.block))
    parts.append(RULE + "\n")
    return "".join(parts)


def log_ir(ir: LabelIR) -> None:
    """Write the listing of the whole IR to standard output."""
    sys.stdout.write(format_ir(ir))
    sys.stdout.flush()