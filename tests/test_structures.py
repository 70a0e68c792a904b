import pytest

from dsapuzzles.leetcode.structures import MyQueue, MyStack


def test_stack_basic():
    stack = MyStack()
    stack.push(1)
    stack.push(2)
    assert stack.top() == 2
    assert stack.pop() == 2
    assert not stack.empty()


def test_stack_lifo_order_and_empty():
    stack = MyStack()
    for value in (5, 6, 7):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [7, 6, 5]
    assert stack.empty()


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        MyStack().pop()


def test_stack_top_empty_raises():
    with pytest.raises(IndexError):
        MyStack().top()


def test_stack_capacity():
    stack = MyStack()
    for value in range(100):
        stack.push(value)
    assert stack.top() == 99
    with pytest.raises(IndexError):
        stack.push(100)


def test_queue_basic():
    queue = MyQueue()
    queue.push(1)
    queue.push(2)
    assert queue.peek() == 1
    assert queue.pop() == 1
    assert not queue.empty()
    assert queue.peek() == 2
    assert queue.pop() == 2
    assert queue.empty()


def test_queue_interleaved_fifo():
    queue = MyQueue()
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    assert queue.pop() == 2
    assert queue.pop() == 3
    assert queue.empty()


def test_queue_pop_empty_raises():
    with pytest.raises(IndexError):
        MyQueue().pop()


def test_queue_peek_empty_raises():
    with pytest.raises(IndexError):
        MyQueue().peek()