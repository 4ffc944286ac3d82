'''
Created on Oct 19, 2026
'''
from tipper.delaunay.errors import CapacityError, StaleSlotError

# ------------------------------------------------------------------------------
# Convex hull as cyclic list
#


class CyclicList(object):
    """A fixed size, cyclic, doubly linked list of edge indices, stored in
    arrays.

    Slots that are not in use are chained: the data of an empty slot holds
    the next empty slot and hole points to the first empty slot, so adding
    and deleting are O(1) without allocating.

    Positive direction (next) is ccw around the hull, negative (prev) is cw.

    Slot positions are checked: using a slot that is empty raises a
    StaleSlotError instead of silently corrupting the list.
    """

    __slots__ = ('size', 'num', 'hole', 'last',
                 '_data', '_next', '_prev', '_used')

    def __init__(self, size):
        if size < 1:
            raise CapacityError("cyclic list needs room for at least 1 item")
        self.size = size
        self.num = 0
        # first empty slot
        self.hole = 0
        # slot most recently filled
        self.last = 0
        self._data = list(range(1, size + 1))
        self._next = [0] * size
        self._prev = [0] * size
        self._used = [False] * size

    def __len__(self):
        return self.num

    def __contains__(self, pos):
        return isinstance(pos, int) and 0 <= pos < self.size and \
            self._used[pos]

    def __iter__(self):
        """Edge indices, in positive direction, starting at the occupied
        slot with the lowest position"""
        if self.num == 0:
            return
        start = self._used.index(True)
        pos = start
        for _ in range(self.num):
            yield self._data[pos]
            pos = self._next[pos]

    def _check(self, pos):
        if pos not in self:
            raise StaleSlotError("slot {} is not in use".format(pos))

    def _take(self, edge):
        """Fill the first empty slot with *edge*, returns the slot"""
        if self.hole >= self.size:
            raise CapacityError(
                "cyclic list is full ({} items)".format(self.size))
        pos = self.hole
        self.hole = self._data[pos]
        self._data[pos] = edge
        self._used[pos] = True
        self.last = pos
        self.num += 1
        return pos

    def _release(self, pos):
        self._check(pos)
        nxt, prv = self._next[pos], self._prev[pos]
        self._next[prv] = nxt
        self._prev[nxt] = prv
        self._data[pos] = self.hole
        self._used[pos] = False
        self.hole = pos
        self.num -= 1
        return nxt, prv

    def edge(self, pos):
        """Edge index stored at slot pos"""
        self._check(pos)
        return self._data[pos]

    def next_pos(self, pos):
        self._check(pos)
        return self._next[pos]

    def prev_pos(self, pos):
        self._check(pos)
        return self._prev[pos]

    def add(self, edge):
        """Append edge, behind the item added last (i.e. before the first
        item, as the list is cyclic). Used to build the list from scratch,
        so make sure you add the edges in ccw order.
        """
        if self.num == 0:
            pos = self._take(edge)
            self._next[pos] = pos
            self._prev[pos] = pos
            return pos
        return self.add_after(self.last, edge)

    def add_before(self, pos, edge):
        """Insert edge before slot pos, returns the new slot"""
        if self.num == 0:
            return self.add(edge)
        self._check(pos)
        new = self._take(edge)
        prv = self._prev[pos]
        self._prev[new] = prv
        self._next[new] = pos
        self._next[prv] = new
        self._prev[pos] = new
        return new

    def add_after(self, pos, edge):
        """Insert edge after slot pos, returns the new slot"""
        if self.num == 0:
            return self.add(edge)
        self._check(pos)
        new = self._take(edge)
        nxt = self._next[pos]
        self._next[new] = nxt
        self._prev[new] = pos
        self._prev[nxt] = new
        self._next[pos] = new
        return new

    def delete_forward(self, pos):
        """Remove slot pos, returns the slot that followed it (positive
        direction), or None if the list is now empty"""
        nxt, _ = self._release(pos)
        return nxt if self.num else None

    def delete_backward(self, pos):
        """Remove slot pos, returns the slot that preceded it (negative
        direction), or None if the list is now empty"""
        _, prv = self._release(pos)
        return prv if self.num else None
