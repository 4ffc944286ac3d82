'''
Created on Oct 19, 2026
'''

# ------------------------------------------------------------------------------
# Errors
#     All of these are fatal for the triangulation at hand: there is no
#     partial result and nothing to retry.
#


class TriangulationError(ValueError):
    """Base class of everything the triangulator raises"""


class PreconditionError(TriangulationError):
    """Input or arguments the algorithm cannot work with"""


class CapacityError(PreconditionError):
    """A fixed size table is full"""


class StaleSlotError(PreconditionError):
    """A hull slot is used that is not (or no longer) occupied"""


class TopologyError(TriangulationError):
    """The edge table does not describe a consistent triangulation"""


class VisibilityError(TopologyError):
    """A new point sees none of the hull edges it should see"""

    def __init__(self, message, point=None):
        super(VisibilityError, self).__init__(message)
        self.point = point
