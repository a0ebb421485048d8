"""Float32 vector values consumed and produced by :class:`rotkit.quaternion.Quaternion`."""

from collections.abc import Iterator
from typing import Any, ClassVar

import numpy as np

from rotkit.formatting import NumberFormat, format_components
from rotkit.utils.hashing import hash_components


class _Vector:
    """Immutable tuple of float32 components with value equality."""

    __slots__ = ('_c',)

    _fields: tuple[str, ...] = ()
    _c: tuple[np.float32, ...]

    def __init__(self, *components: float) -> None:
        object.__setattr__(self, '_c', tuple(np.float32(c) for c in components))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._c)

    def __len__(self) -> int:
        return len(self._c)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(a == b for a, b in zip(self._c, other._c))

    def __hash__(self) -> int:
        return hash_components(self._c)

    def __repr__(self) -> str:
        args = ', '.join(f'{name}={float(c)!r}' for name, c in zip(self._fields, self._c))
        return f'{type(self).__name__}({args})'

    def __str__(self) -> str:
        return self.format()

    def __format__(self, spec: str) -> str:
        return self.format(spec or None)

    def __copy__(self) -> '_Vector':
        return self

    def __deepcopy__(self, memo: dict) -> '_Vector':
        return self

    def __reduce__(self) -> tuple:
        return (type(self), tuple(self))

    def format(self, spec: str | None = None, number_format: NumberFormat | None = None) -> str:
        """Render the components in declaration order, e.g. ``1, 2, 3``."""
        return format_components(self._c, spec, number_format)

    def to_array(self) -> np.ndarray:
        return np.array(self._c, dtype=np.float32)


class Vector2(_Vector):
    __slots__ = ()
    _fields = ('x', 'y')

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y)

    @property
    def x(self) -> float:
        return float(self._c[0])

    @property
    def y(self) -> float:
        return float(self._c[1])


class Vector3(_Vector):
    """
    Three component float32 vector.

    Supports the arithmetic used by quaternion rotation: addition,
    subtraction, negation, scaling and the cross product.
    """

    __slots__ = ()
    _fields = ('x', 'y', 'z')

    ZERO: ClassVar['Vector3']
    UNIT_X: ClassVar['Vector3']
    UNIT_Y: ClassVar['Vector3']
    UNIT_Z: ClassVar['Vector3']

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z)

    @property
    def x(self) -> float:
        return float(self._c[0])

    @property
    def y(self) -> float:
        return float(self._c[1])

    @property
    def z(self) -> float:
        return float(self._c[2])

    @classmethod
    def from_sequence(cls, values: Any) -> 'Vector3':
        x, y, z = values
        return cls(x, y, z)

    def __add__(self, other: object) -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        (ax, ay, az), (bx, by, bz) = self._c, other._c
        return Vector3(ax + bx, ay + by, az + bz)

    def __sub__(self, other: object) -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        (ax, ay, az), (bx, by, bz) = self._c, other._c
        return Vector3(ax - bx, ay - by, az - bz)

    def __neg__(self) -> 'Vector3':
        x, y, z = self._c
        return Vector3(-x, -y, -z)

    def __mul__(self, scalar: object) -> 'Vector3':
        if not isinstance(scalar, (int, float, np.floating)):
            return NotImplemented
        s = np.float32(scalar)
        x, y, z = self._c
        return Vector3(x * s, y * s, z * s)

    __rmul__ = __mul__

    def cross(self, other: 'Vector3') -> 'Vector3':
        (ax, ay, az), (bx, by, bz) = self._c, other._c
        return Vector3(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        )

    def dot(self, other: 'Vector3') -> float:
        (ax, ay, az), (bx, by, bz) = self._c, other._c
        return float(ax * bx + ay * by + az * bz)

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return float(np.sqrt(np.float32(self.length_squared())))


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)


class Vector4(_Vector):
    """Four component float32 vector in ``(x, y, z, w)`` order."""

    __slots__ = ()
    _fields = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        super().__init__(x, y, z, w)

    @property
    def x(self) -> float:
        return float(self._c[0])

    @property
    def y(self) -> float:
        return float(self._c[1])

    @property
    def z(self) -> float:
        return float(self._c[2])

    @property
    def w(self) -> float:
        return float(self._c[3])
