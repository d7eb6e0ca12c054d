'''
RPN calculator.

Supports plain old arithmetic, square roots, powers and Fibonacci numbers on a
stack of floats that carries over from one line to the next. Not intended to
be Turing-complete!

Each line is evaluated atomically: if any token on it fails, the stack is put
back exactly as it was before the line, and nothing is added to the history.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine


__all__ = 'Machine', 'Lexer', 'CLI'
