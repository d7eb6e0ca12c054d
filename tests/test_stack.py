'''
Operand stack tests
'''

from rpncalc.stack import OperandStack
from rpncalc.util import EmptyStack, InsufficientOperands

from pytest import raises


def test_push_pop_order():
    s = OperandStack()
    s.push(1.0)
    s.push(2.0)
    assert s.pop() == 2.0
    assert s.pop() == 1.0
    assert len(s) == 0


def test_pop_empty():
    with raises(EmptyStack, match='Empty stack'):
        OperandStack().pop()


def test_peek_leaves_stack_alone():
    s = OperandStack([1.0, 2.0])
    assert s.peek() == 2.0
    assert list(s) == [1.0, 2.0]
    with raises(EmptyStack):
        OperandStack().peek()


def test_popmany_topmost_first():
    s = OperandStack([1.0, 2.0, 3.0])
    assert s.popmany(2) == [3.0, 2.0]
    assert list(s) == [1.0]


def test_popmany_never_pops_partially():
    s = OperandStack([1.0])
    with raises(InsufficientOperands) as excinfo:
        s.popmany(2)
    assert excinfo.value.needed == 2
    assert excinfo.value.available == 1
    assert list(s) == [1.0]


def test_ensure_size():
    s = OperandStack([1.0, 2.0])
    s.ensure_size(0)
    s.ensure_size(2)
    with raises(InsufficientOperands, match='Less than 3 element'):
        s.ensure_size(3)


def test_snapshot_is_a_copy():
    s = OperandStack([1.0, 2.0])
    snapshot = s.snapshot()
    s.push(3.0)
    s.clear()
    assert snapshot == (1.0, 2.0)
    s.restore(snapshot)
    assert list(s) == [1.0, 2.0]
    s.pop()
    assert snapshot == (1.0, 2.0)


def test_clear():
    s = OperandStack([1.0, 2.0])
    s.clear()
    assert len(s) == 0
    assert not s
