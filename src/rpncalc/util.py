from functools import wraps


class RPNError(Exception):
    pass


class EvaluationError(RPNError):
    '''
    Failed evaluation. The stack has already been rolled back when seen.
    '''


class EmptyStack(EvaluationError):
    def __init__(self):
        super().__init__('Empty stack')


class InsufficientOperands(EvaluationError):
    def __init__(self, needed, available):
        super().__init__('Less than {} element(s) on stack'.format(needed))
        self.needed = needed
        self.available = available


class DivideByZero(EvaluationError):
    def __init__(self):
        super().__init__('Division by zero')


class NegativeSqrt(EvaluationError):
    def __init__(self, value):
        super().__init__('Square root of negative number {}'.format(value))
        self.value = value


class InvalidFibInput(EvaluationError):
    def __init__(self, value):
        super().__init__('fib needs a non-negative integer, got {}'
                         .format(value))
        self.value = value


class FibOverflow(EvaluationError):
    def __init__(self, value, limit):
        super().__init__('fib {} too large, would overflow (max {})'
                         .format(value, limit))
        self.value = value
        self.limit = limit


class UnknownOperator(EvaluationError):
    def __init__(self, token):
        super().__init__('Unknown operator {}'.format(token))
        self.token = token


class EmptyResult(EvaluationError):
    def __init__(self):
        super().__init__('Expression left nothing on the stack')


class InvalidLiteral(EvaluationError):
    pass


def wrap_user_errors(fmt, error=EvaluationError):
    '''
    Ugly hack decorator that converts exceptions to calculator errors.

    Passes through RPNErrors. fmt is formatted with the call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
