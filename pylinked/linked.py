from __future__ import annotations
import sys
from typing import Any, Generic, Iterable, Iterator, Optional, TextIO, TypeVar


T = TypeVar('T')


VISIT_SEPARATOR = '-->'


class Node(Generic[T]):
    def __init__(self, value: T, next: Optional[Node[T]] = None):
        self._value: T = value
        self.next: Optional[Node[T]] = next


    @property
    def value(self) -> T:
        return self._value


    def __repr__(self):
        return f'Node({self._value!r})'



class LinkedList(Generic[T]):
    ''' Singly linked list.

    Not thread safe: callers sharing a list must hold their own lock.
    Every traversal except has_cycle() assumes the chain ends, so a list
    passed through create_cycle() is only good for has_cycle().
    '''

    def __init__(self, values: Optional[Iterable[T]] = None, out: Optional[TextIO] = None):
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._out: Optional[TextIO] = out
        if values is not None:
            for x in values:
                self.add_last(x)


    def add_first(self, value: T):
        n = Node(value, self._head)
        if self._head is None:
            self._tail = n
        self._head = n


    def add_last(self, value: T):
        if self._tail is None:
            self.add_first(value)
            return
        n = Node(value)
        self._tail.next = n
        self._tail = n


    def search(self, value: T) -> bool:
        for x in self:
            if x == value:
                return True
        return False


    def find_max(self) -> Optional[T]:
        if self._head is None:
            return None
        result = self._head.value
        node = self._head.next
        while node is not None:
            if node.value > result:  # type: ignore
                result = node.value
            node = node.next
        return result


    def find_min(self) -> Optional[T]:
        if self._head is None:
            return None
        result = self._head.value
        node = self._head.next
        while node is not None:
            if node.value < result:  # type: ignore
                result = node.value
            node = node.next
        return result


    def length(self) -> int:
        count = 0
        node = self._head
        while node is not None:
            count += 1
            node = node.next
        return count


    def get_at_index(self, index: int) -> Optional[T]:
        ''' return None when index is negative or past the last node
        '''
        if index < 0:
            return None
        node = self._head
        while node is not None and index > 0:
            node = node.next
            index -= 1
        if node is None:
            return None
        return node.value


    def get_first(self) -> Optional[T]:
        if self._head is None:
            return None
        return self._head.value


    def get_last(self) -> Optional[T]:
        if self._tail is None:
            return None
        return self._tail.value


    def visit(self) -> str:
        text = ''.join(f'{x}{VISIT_SEPARATOR}' for x in self)
        if text:
            print(text, end='', file=self._out if self._out is not None else sys.stdout)
        return text


    def delete(self, value: T) -> bool:
        if self._head is None:
            return False

        if self._head.value == value:
            n = self._head
            self._head = n.next
            if self._head is None:
                self._tail = None
            n.next = None
            return True

        prev = self._head
        while prev.next is not None:
            n = prev.next
            if n.value == value:
                prev.next = n.next
                if n is self._tail:
                    self._tail = prev
                n.next = None
                return True
            prev = n
        return False


    def reverse(self):
        prev: Optional[Node[T]] = None
        node = self._head
        self._tail = node
        while node is not None:
            temp = node.next
            node.next = prev
            prev = node
            node = temp
        self._head = prev


    def create_cycle(self):
        if self._head is None:
            return
        assert self._tail is not None
        # tail now points back to head
        self._tail.next = self._head


    def find_middle_value(self) -> Optional[T]:
        ''' for an even length, the second of the two middle values
        '''
        if self._head is None:
            return None
        slow = self._head
        fast: Optional[Node[T]] = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next  # type: ignore
        return slow.value


    def find_nth_from_end(self, n: int) -> Optional[T]:
        ''' n == 0 is the last value; None when n is out of range
        '''
        if n < 0:
            return None
        lead = self._head
        for _ in range(n):
            if lead is None:
                return None
            lead = lead.next
        if lead is None:
            return None

        trail = self._head
        while lead.next is not None:
            lead = lead.next
            trail = trail.next  # type: ignore
        return trail.value  # type: ignore


    def has_cycle(self) -> bool:
        slow = self._head
        fast = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next  # type: ignore
            if fast is slow:
                return True
        return False


    def insert_ascending(self, value: T):
        ''' insert before the first greater value, i.e. after any equal ones
        '''
        if self._head is None or value < self._head.value:  # type: ignore
            self.add_first(value)
            return

        prev = self._head
        while prev.next is not None and not value < prev.next.value:  # type: ignore
            prev = prev.next
        n = Node(value, prev.next)
        prev.next = n
        if n.next is None:
            self._tail = n


    def __len__(self):
        return self.length()


    def __bool__(self):
        return self._head is not None


    def __contains__(self, value: Any):
        return self.search(value)


    def __getitem__(self, index: int) -> T:
        if 0 <= index:
            node = self._head
            while node is not None:
                if index == 0:
                    return node.value
                node = node.next
                index -= 1
        raise IndexError('LinkedList index out of range')


    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


    def iternodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next


    def __repr__(self):
        return f'LinkedList({list(self)!r})'
