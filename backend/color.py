# color.py
import hashlib
import random
from typing import NamedTuple

# Channel bounds keep backgrounds mid-luminance so white initials stay readable.
CHANNEL_MIN = 30
CHANNEL_MAX = 214


class RGBColor(NamedTuple):
    """Normalized color, every channel in [CHANNEL_MIN/255, CHANNEL_MAX/255]."""
    red: float
    green: float
    blue: float

    def to_rgb255(self):
        return tuple(round(channel * 255) for channel in self)

    def hex(self):
        return "#{:02x}{:02x}{:02x}".format(*self.to_rgb255())


def stable_hash(seed):
    """
    Returns a 64-bit integer hash of seed that is the same in every process.
    """
    digest = hashlib.sha256(seed.encode("utf-8", "surrogatepass")).digest()
    return int.from_bytes(digest[:8], "big")


def color_for(seed):
    """
    Maps seed to a pseudo-random but reproducible color.
    A local generator is seeded per call so the global random state is left alone.
    """
    rng = random.Random(stable_hash(seed))
    red, green, blue = (rng.randint(CHANNEL_MIN, CHANNEL_MAX) / 255 for _ in range(3))
    return RGBColor(red, green, blue)
