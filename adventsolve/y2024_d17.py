"""Run the three-register computer and find a program that prints itself."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/17")

NOT_FOUND = 2**64 - 1


def _combo(registers, operand):
    if operand >= 7:
        raise ValueError(f"invalid combo operand {operand}")
    return operand if operand <= 3 else registers[operand - 4]


def run_program(registers, program):
    """Run ``program`` from registers (A, B, C) and return its output values."""
    regs = [registers[0], registers[1], registers[2]]
    output = []
    pc = 0
    while pc < len(program):
        opcode = program[pc]
        operand = program[pc + 1]
        if opcode == 0:
            regs[0] >>= _combo(regs, operand)
        elif opcode == 1:
            regs[1] ^= operand
        elif opcode == 2:
            regs[1] = _combo(regs, operand) % 8
        elif opcode == 3:
            if regs[0] != 0:
                pc = operand
                continue
        elif opcode == 4:
            regs[1] ^= regs[2]
        elif opcode == 5:
            output.append(_combo(regs, operand) % 8)
        elif opcode == 6:
            regs[1] = regs[0] >> _combo(regs, operand)
        elif opcode == 7:
            regs[2] = regs[0] >> _combo(regs, operand)
        else:
            raise ValueError(f"invalid opcode {opcode}")
        pc += 2
    return output


def _find(program, position, a):
    if run_program([a, 0, 0], program) == program:
        return a
    if position >= len(program):
        return NOT_FOUND
    best = NOT_FOUND
    for s in range(8):
        candidate = a + s
        out = run_program([candidate, 0, 0], program)
        if program[len(program) - 1 - position] == out[0]:
            if out == program:
                best = min(best, candidate)
            best = min(best, _find(program, position + 1, candidate * 8))
    return best


def find_quine(program):
    """Return the lowest A register making ``program`` output itself, or NOT_FOUND."""
    return _find(list(program), 0, 0)


def _parse(text):
    regs_text, separator, program_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between registers and program")
    registers = [int(line.split(": ")[1]) for line in regs_text.splitlines()]
    _, colon, values = program_text.partition(": ")
    if not colon:
        raise ValueError("expected 'Program: ...'")
    program = [int(n.strip()) for n in values.split(",")]
    return registers, program


def solve(text):
    """Return the program output as a comma list and the self-printing A value."""
    registers, program = _parse(text)
    output = ",".join(str(n) for n in run_program(registers, program))
    return output, find_quine(program)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the chronospatial computer.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    output, quine = solve(args.path.read_text())
    print(f"p1: {output}")
    print(f"p2: {quine}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())