# filename: linked_list.py


class Node:
    def __init__(self, data, next=None):
        self.data = data
        self.next = next

    def __str__(self):
        return str(self.data)

    def __repr__(self):
        return f"Node({self.data!r})"


class SimpleLinkedList:
    """Singly linked list owned through its ``head`` node."""

    def __init__(self, values=()):
        self.head = None
        for value in values:
            self.add(value)

    def add(self, data):
        new_node = Node(data)
        if self.head is None:
            self.head = new_node
            return new_node
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = new_node
        return new_node

    append = add

    def find_middle(self):
        """Return the middle node, the earlier one for an even length.

        ``fast`` moves two nodes for every node ``slow`` moves, so ``slow``
        sits at index (n - 1) // 2 once ``fast`` cannot take another double
        step. An empty list gives None.
        """
        if self.head is None:
            return None

        slow = self.head
        fast = self.head
        while fast.next is not None and fast.next.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow

    def invert(self):
        """Relink the nodes back to front and return them as a new list.

        The nodes move to the returned list, so this list is left empty.
        """
        prev = None
        current = self.head
        while current is not None:
            next_node = current.next
            current.next = prev
            prev = current
            current = next_node

        inverted = SimpleLinkedList()
        inverted.head = prev
        self.head = None
        return inverted

    reverse = invert

    def __iter__(self):
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self):
        return sum(1 for _ in self)

    def __str__(self):
        return "".join(str(data) for data in self)
