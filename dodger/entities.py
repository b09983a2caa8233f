from collections import namedtuple

AsteroidRecord = namedtuple("AsteroidRecord", ["x", "y", "radius", "rotation"])
StarRecord = namedtuple("StarRecord", ["x", "y", "radius", "glow"])


class Player:
    def __init__(self, x, y, radius, speed):
        self.x = float(x)
        self.y = float(y)
        self.radius = radius
        self.speed = speed
        self.target_x = None


class Asteroid:
    __slots__ = ("x", "y", "radius", "vy", "rotation", "spin")

    def __init__(self, x, y, radius, vy, rotation=0.0, spin=0.0):
        self.x = float(x)
        self.y = float(y)
        self.radius = float(radius)
        self.vy = float(vy)
        self.rotation = float(rotation)
        self.spin = float(spin)

    def update(self, dt):
        self.y += self.vy * dt
        self.rotation += self.spin * dt

    def record(self):
        return AsteroidRecord(self.x, self.y, self.radius, self.rotation)


class Star:
    __slots__ = ("x", "y", "radius", "vy", "glow")

    def __init__(self, x, y, radius, vy, glow=1.0):
        self.x = float(x)
        self.y = float(y)
        self.radius = float(radius)
        self.vy = float(vy)
        self.glow = float(glow)

    def update(self, dt):
        self.y += self.vy * dt

    def record(self):
        return StarRecord(self.x, self.y, self.radius, self.glow)


def circles_overlap(ax, ay, ar, bx, by, br):
    """True when two circles touch or overlap. Touching counts as a hit."""
    dx = ax - bx
    dy = ay - by
    r = ar + br
    return dx * dx + dy * dy <= r * r


def has_exited(entity, height, margin):
    return entity.y - entity.radius > height + margin


def swap_remove(items, index):
    """Remove items[index] in O(1) by moving the last element into its slot."""
    last = items.pop()
    if index < len(items):
        items[index] = last
