from typing import NamedTuple, Optional, Sequence

from .constants import ASPECT_TYPES
from .models import AspectDefinition, DetectedAspect
from .zodiac import normalize


class AspectPoint(NamedTuple):
    name: str
    longitude: float
    key: Optional[str] = None


def _angle_diff(a: float, b: float) -> float:
    """Return the angular separation of two longitudes folded into [0, 180]."""

    d = abs(normalize(a) - normalize(b))
    if d > 180:
        d = 360 - d
    return d


def find_aspects(
    points: Sequence[AspectPoint],
    definitions: Sequence[AspectDefinition] = ASPECT_TYPES,
) -> list[DetectedAspect]:
    """Detect aspects between every unordered pair of ``points``.

    Pairs are visited in input order (i < j) and definitions in table
    order. A pair may match several definitions when their orb windows
    overlap; every match is reported.
    """

    res = []
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            p1, p2 = points[i], points[j]
            d = _angle_diff(p1.longitude, p2.longitude)
            for definition in definitions:
                orb = abs(d - definition.angle)
                if orb <= definition.orb:
                    res.append(
                        DetectedAspect(
                            point1=p1.name,
                            point2=p2.name,
                            definition=definition,
                            orb=round(orb, 2),
                            point1_key=p1.key,
                            point2_key=p2.key,
                        )
                    )
    return res
