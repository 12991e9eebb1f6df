import matplotlib.pyplot as plt
from itertools import cycle

from .Polygon import Polygon

# Debug plots of clipping input and results. The polygons are instances of
# Polygon or lists of points (x,y).

def plotPoly(polygon,vertsOrder,color='k',width=1.,order=100):
    # Draws the edges along the linked list of the polygon. Intersection
    # vertices of a polygon consumed by a clipping are marked as entry
    # (green triangle up) or exit (red triangle down).
    if not isinstance(polygon, Polygon):
        polygon = Polygon.fromPointlist(polygon)
    for count, v in enumerate(polygon.iter()):
        plt.plot([v.x,v.next.x],[v.y,v.next.y],color,linewidth=width,zorder=order)
        if v.intersect:
            plt.plot(v.x,v.y,'g^' if v.entry else 'rv',markersize=6,zorder=order+1)
        if vertsOrder:
            plt.text(v.x,v.y,str(count),fontsize=12)

def plotFillPolyList(polyList):
    prop_cycle = plt.rcParams['axes.prop_cycle']
    iterColor = cycle(prop_cycle.by_key()['color'])
    for poly in polyList:
        if not isinstance(poly, Polygon):
            poly = Polygon.fromPointlist(poly)
        plotPoly(poly,False,'k')
        points = poly.points()
        plt.fill([p[0] for p in points],[p[1] for p in points],next(iterColor),alpha=0.5)

def plotClipResult(subject,clipper,result,vertsOrder=False):
    # input polygons as dashed outlines, the result filled
    plotPoly(subject,vertsOrder,'b--',width=0.5,order=200)
    plotPoly(clipper,vertsOrder,'r--',width=0.5,order=200)
    plotFillPolyList(result)

def plotEnd():
    plt.gca().axis('equal')
    plt.show()
