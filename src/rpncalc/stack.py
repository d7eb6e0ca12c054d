from collections import deque

from .util import EmptyStack, InsufficientOperands


class OperandStack:
    '''
    Stack of floats the machine operates on. Top is the rightmost element.
    '''

    def __init__(self, values=()):
        self._values = deque(values)

    def push(self, value):
        self._values.append(value)

    def pop(self):
        '''
        Remove and return the element at the top of the stack.
        '''
        if not self._values:
            raise EmptyStack()
        return self._values.pop()

    def popmany(self, n=1):
        '''
        Pop specified number of elements from stack, topmost first.

        Nothing is popped if there aren't enough.
        '''
        self.ensure_size(n)
        return [self._values.pop() for _ in range(n)]

    def peek(self):
        if not self._values:
            raise EmptyStack()
        return self._values[-1]

    def ensure_size(self, n):
        if len(self._values) < n:
            raise InsufficientOperands(n, len(self._values))

    def clear(self):
        self._values.clear()

    def snapshot(self):
        return tuple(self._values)

    def restore(self, snapshot):
        self._values = deque(snapshot)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        # Bottom of the stack first.
        return iter(self._values)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self._values))
