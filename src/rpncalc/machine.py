from inspect import signature as getsignature, Parameter
import math
import operator

from .util import (wrap_user_errors, DivideByZero, NegativeSqrt,
                   InvalidFibInput, FibOverflow, UnknownOperator, EmptyResult,
                   InvalidLiteral)
from .stack import OperandStack
from .history import History
from .lexer import Lexer, LITERAL


# Largest index whose Fibonacci number still fits in an unsigned 64-bit int.
FIB_LIMIT = 93


def _binary(f):
    '''
    Dirty hack to work around 2-arg builtins failing inspect.getsignature.
    '''
    def wrapped(left, right):
        return f(left, right)
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def divide(left, right):
    '''
    Divide left by right.
    '''
    if right == 0:
        raise DivideByZero()
    return left / right


def _isodd(n):
    return n.is_integer() and n % 2 == 1


def power(left, right):
    '''
    Raise left to the power of right.

    Like C's pow: overflow and poles give infinity, a negative base with a
    fractional exponent gives NaN.
    '''
    try:
        return math.pow(left, right)
    except OverflowError:
        return math.copysign(math.inf, left) if _isodd(right) else math.inf
    except ValueError:
        if left == 0:
            return math.copysign(math.inf, left) if _isodd(right) else math.inf
        return math.nan


def sqrt(value):
    '''
    Square root.
    '''
    if value < 0:
        raise NegativeSqrt(value)
    return math.sqrt(value)


def fib(n):
    '''
    n-th Fibonacci number, with fib 0 = 0 and fib 1 = 1.
    '''
    if n < 0 or not float(n).is_integer():
        raise InvalidFibInput(n)
    if n > FIB_LIMIT:
        raise FibOverflow(n, FIB_LIMIT)
    a, b = 0, 1
    for _ in range(int(n)):
        a, b = b, a + b
    return float(a)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Evaluates a line of lexemes at a time, atomically: either every token is
    applied, or the stack is left exactly as it was. The stack carries over
    from one evaluation to the next.
    '''

    DEFAULT_PRECISION = None
    # Integral floats past this print in full; they're no longer exact.
    EXACT_LIMIT = 1e16

    OPERATORS = {
        '+': _binary(operator.__add__),
        '-': _binary(operator.__sub__),
        '*': _binary(operator.__mul__),
        '/': divide,
        '^': power,
        'sqrt': sqrt,
        'fib': fib,
    }

    def __init__(self, precision=DEFAULT_PRECISION):
        '''
        Create empty stack machine.

        :param precision: Significant digits on output; None for as many as
                          needed.
        '''
        self.stack = OperandStack()
        self.history = History()
        self.lexer = Lexer()
        if precision is not None and precision < 0:
            raise ValueError('precision must not be negative, got {}'
                             .format(precision))
        self.precision = precision

    def evaluate(self, expression):
        '''
        Run every token of expression and return the top of the stack.

        On any error, the stack is rolled back before the error propagates.
        On success, the expression is recorded in the history.
        '''
        snapshot = self.stack.snapshot()
        try:
            for token in self.lexer.lex(expression):
                self.feed(token)
            if not self.stack:
                raise EmptyResult()
            result = self.stack.peek()
            formatted = self.format(result)
        except BaseException:
            self.stack.restore(snapshot)
            raise
        self.history.append(expression, formatted)
        return result

    def feed(self, token):
        '''
        Stack or run a single token on the machine.
        '''
        if token.kind == LITERAL:
            self.stack.push(self._iconvert(token.text))
        else:
            self._apply(self.parse(token.text))

    def parse(self, name):
        '''
        Look up the operator called name.
        '''
        try:
            return type(self).OPERATORS[name]
        except KeyError:
            raise UnknownOperator(name) from None

    def _arity(self, f):
        '''
        Return number of non-default positional arguments.
        '''
        parameters = getsignature(f).parameters.values()
        positionals = [parameter
                       for parameter
                       in parameters
                       if parameter.kind == Parameter.POSITIONAL_OR_KEYWORD and
                          parameter.default == Parameter.empty]
        return len(positionals)

    def _apply(self, f):
        '''
        Apply operator to stack, popping arguments as needed.
        '''
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = reversed(self.stack.popmany(self._arity(f)))
        self.stack.push(f(*args))

    @wrap_user_errors('Cannot convert {1}', error=InvalidLiteral)
    def _iconvert(self, number):
        '''
        Convert number to internal representation on input.
        '''
        return float(number)

    def format(self, value):
        '''
        Format number for output, rounding to precision if set.
        '''
        if self.precision is not None:
            return '{:.{}g}'.format(value, self.precision)
        value = float(value)
        if value.is_integer() and abs(value) < type(self).EXACT_LIMIT:
            return str(int(value))
        return repr(value)

    def format_stack(self):
        '''
        Format all elements on the stack, bottom of the stack first.
        '''
        return ' '.join(self.format(value) for value in self.stack)

    def clear(self):
        '''
        Clear everything from the stack. History is kept.
        '''
        self.stack.clear()
