from functools import reduce

from libstructs import OPERATIONS

def fold(operation, values):
    """
    Brute force combine of the values, used as the reference model.
    """
    op = OPERATIONS[operation]
    return reduce(op.combine, values, op.identity)
