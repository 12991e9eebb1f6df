# Constants of the Greiner-Hormann polygon clipping.

# x-coordinate of the far end of the horizontal ray used by the odd-even
# point-in-polygon test. All input coordinates must be smaller.
RayFarX = 1000000.

# Operation used by clipPolygon() when none is given.
DefaultOperation = 'difference'

# Entry seeds (subject, clipper) of the traversal for every operation,
# True = forward, False = backward. 'reversed-diff' (clipper minus subject)
# is the subject clipped with the seeds swapped from 'difference', see
# Polygon.reversedDifference().
OperationSeeds = {
    'union':         (False, False),
    'intersection':  (True,  True),
    'difference':    (False, True),
    'reversed-diff': (True,  False)
}
