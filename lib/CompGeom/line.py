import logging
logger = logging.getLogger("CompGeom.line")

def intersectLineLine(p1, p2, q1, q2):
    # Intersection of the infinite lines through <p1,p2> and <q1,q2>.
    # Returns the line parameters (u1,u2) of the intersection, measured
    # from p1 towards p2 and from q1 towards q2, or None for parallel lines.
    # Algorithm based on: http://paulbourke.net/geometry/lineline2d/
    d = (q2[1] - q1[1]) * (p2[0] - p1[0]) - (q2[0] - q1[0]) * (p2[1] - p1[1])
    if d == 0: return None
    n1 = (q2[0] - q1[0]) * (p1[1] - q1[1]) - (q2[1] - q1[1]) * (p1[0] - q1[0])
    n2 = (p2[0] - p1[0]) * (p1[1] - q1[1]) - (p2[1] - p1[1]) * (p1[0] - q1[0])
    return n1 / d, n2 / d

def intersectEdges(s1, s2, c1, c2):
    """
    Intersection test of the subject edge <s1,s2> with the clip edge <c1,c2>,
    as required by the Greiner-Hormann clipping.

    s1,s2,c1,c2: Points given as anything indexable by 0 and 1 (tuples,
                 mathutils.Vector, Vertex).
    return:      None, if the edges are parallel, do not cross or only touch
                 at an end point. Otherwise a tuple (point, us, uc), where
                 point is the tuple (x,y) of the crossing and us, uc are its
                 relative positions in (0,1) along <s1,s2> and <c1,c2>.

    Crossings where one of the parameters is exactly 0 or 1 are degenerate
    and are not reported, so that no intersection vertex is ever inserted
    on top of an original vertex.
    """
    ll = intersectLineLine(s1, s2, c1, c2)
    if ll is None: return None
    us, uc = ll

    if ((us == 0. or us == 1.) and (0. <= uc <= 1.)) or \
       ((uc == 0. or uc == 1.) and (0. <= us <= 1.)):
        logger.debug("intersectEdges() degenerate case ignored: us=%s uc=%s", us, uc)
        return None

    if 0. < us < 1. and 0. < uc < 1.:
        x = s1[0] + us * (s2[0] - s1[0])
        y = s1[1] + us * (s2[1] - s1[1])
        return (x, y), us, uc

    return None
