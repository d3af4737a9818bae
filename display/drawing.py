"""
Drawing helpers built on top of a surface's point primitive.
"""


def draw_circle(surface, cx: int, cy: int, radius: int):
    """
    Draw a circle outline using the midpoint algorithm.

    Integer arithmetic only. Each step plots the 8 symmetric points,
    one per octant, through surface.draw_point().

    Args:
        surface: Anything with a draw_point(x, y) method.
        cx: Centre x in pixels.
        cy: Centre y in pixels.
        radius: Radius in pixels.
    """
    diameter = radius * 2

    x = radius - 1
    y = 0
    tx = 1
    ty = 1
    error = tx - diameter

    while x >= y:
        # One point per octant
        surface.draw_point(cx + x, cy - y)
        surface.draw_point(cx + y, cy - x)
        surface.draw_point(cx - y, cy - x)
        surface.draw_point(cx - x, cy - y)
        surface.draw_point(cx - x, cy + y)
        surface.draw_point(cx - y, cy + x)
        surface.draw_point(cx + y, cy + x)
        surface.draw_point(cx + x, cy + y)

        if error <= 0:
            y += 1
            error += ty
            ty += 2
        if error > 0:
            x -= 1
            tx += 2
            error += tx - diameter
