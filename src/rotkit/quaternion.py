"""
Quaternion rotation value in Ogre3D layout ``(w, x, y, z)``.

The type never normalizes. Rotating a vector with :func:`rotate` (or
``q * v``) is only a rigid rotation when ``q`` has unit length; a non-unit
quaternion silently scales the result.

Component orders differ between entry points and are kept that way for
compatibility with existing data:

- ``Quaternion(w, x, y, z)``, :meth:`Quaternion.format` and the binary
  layout use ``(w, x, y, z)``;
- :meth:`Quaternion.from_sequence`, :class:`Vector4` and
  :meth:`Quaternion.to_xyzw` use ``(x, y, z, w)``;
- :func:`hash` folds the components as ``x, y, z, w``.
"""

from typing import Any, ClassVar

import numpy as np

from rotkit.formatting import NumberFormat, format_components
from rotkit.utils.exceptions import InvalidArgumentError, OutOfRangeError
from rotkit.utils.hashing import hash_components
from rotkit.vector import Vector2, Vector3, Vector4

SIZE_IN_BYTES = 16

# four sequential little-endian float32, no padding
QUATERNION_DTYPE = np.dtype([('w', '<f4'), ('x', '<f4'), ('y', '<f4'), ('z', '<f4')])

_TWO = np.float32(2.0)


class Quaternion:
    """
    Immutable four component float32 quaternion.

    :ivar w: Scalar (real) part.
    :ivar x: First imaginary component (i).
    :ivar y: Second imaginary component (j).
    :ivar z: Third imaginary component (k).
    """

    __slots__ = ('_w', '_x', '_y', '_z')

    ZERO: ClassVar['Quaternion']
    IDENTITY: ClassVar['Quaternion']

    def __init__(self, w: float, x: float, y: float, z: float) -> None:
        object.__setattr__(self, '_w', np.float32(w))
        object.__setattr__(self, '_x', np.float32(x))
        object.__setattr__(self, '_y', np.float32(y))
        object.__setattr__(self, '_z', np.float32(z))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError('Quaternion is immutable, use replace()')

    @classmethod
    def from_scalar(cls, w: float) -> 'Quaternion':
        """Quaternion ``(w, 0, 0, 0)``."""
        return cls(w, 0.0, 0.0, 0.0)

    @classmethod
    def from_vector4(cls, value: Vector4) -> 'Quaternion':
        """Copy an ``(x, y, z, w)`` vector into the matching components."""
        return cls(value.w, value.x, value.y, value.z)

    @classmethod
    def from_vector3(cls, value: Vector3, w: float) -> 'Quaternion':
        return cls(w, value.x, value.y, value.z)

    @classmethod
    def from_vector2(cls, value: Vector2, z: float, w: float) -> 'Quaternion':
        return cls(w, value.x, value.y, z)

    @classmethod
    def from_sequence(cls, values: Any) -> 'Quaternion':
        """
        Build a quaternion from exactly four floats ordered ``(x, y, z, w)``.

        :param values: List, tuple or 1-D array with four elements.
        :raises InvalidArgumentError: If ``values`` is None or not a flat numeric sequence.
        :raises OutOfRangeError: If ``values`` does not hold exactly four elements.
        """
        if values is None:
            raise InvalidArgumentError('values must not be None', argument='values')

        try:
            arr = np.asarray(values)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                'values must be a sequence of floats', argument='values'
            ) from e

        # None elements end up as object, numeric strings as unicode
        if arr.dtype.kind not in 'iuf':
            raise InvalidArgumentError(
                'values must be a sequence of floats', argument='values', dtype=str(arr.dtype)
            )
        if arr.ndim != 1:
            raise InvalidArgumentError(
                'values must be a flat sequence', argument='values', ndim=arr.ndim
            )
        if arr.shape[0] != 4:
            raise OutOfRangeError(
                'values must contain exactly four elements',
                argument='values',
                expected=4,
                actual=arr.shape[0],
            )

        x, y, z, w = arr
        return cls(w, x, y, z)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> 'Quaternion':
        """Read the 16 byte ``(w, x, y, z)`` float32 layout written by :meth:`to_bytes`."""
        if data is None:
            raise InvalidArgumentError('data must not be None', argument='data')
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                'data must be bytes-like', argument='data', type=type(data).__name__
            )

        size = memoryview(data).nbytes
        if size != SIZE_IN_BYTES:
            raise OutOfRangeError(
                'data must be exactly 16 bytes',
                argument='data',
                expected=SIZE_IN_BYTES,
                actual=size,
            )

        rec = np.frombuffer(data, dtype=QUATERNION_DTYPE, count=1)[0]
        return cls(rec['w'], rec['x'], rec['y'], rec['z'])

    @property
    def w(self) -> float:
        return float(self._w)

    @property
    def x(self) -> float:
        return float(self._x)

    @property
    def y(self) -> float:
        return float(self._y)

    @property
    def z(self) -> float:
        return float(self._z)

    # scalar + i, j, k naming
    scalar = w
    i = x
    j = y
    k = z

    def replace(self, **components: float) -> 'Quaternion':
        """Copy with some of ``w``, ``x``, ``y``, ``z`` changed."""
        unknown = set(components) - {'w', 'x', 'y', 'z'}
        if unknown:
            raise InvalidArgumentError(
                'unknown quaternion component', argument=', '.join(sorted(unknown))
            )
        return Quaternion(
            components.get('w', self._w),
            components.get('x', self._x),
            components.get('y', self._y),
            components.get('z', self._z),
        )

    def length_squared(self) -> float:
        """
        Sum of the squared components.

        Prefer this over :meth:`length` when only relative magnitudes matter.
        """
        w, x, y, z = self._w, self._x, self._y, self._z
        return float((x * x) + (y * y) + (z * z) + (w * w))

    def length(self) -> float:
        """Euclidean norm ``sqrt(w^2 + x^2 + y^2 + z^2)``."""
        return float(np.sqrt(np.float32(self.length_squared())))

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Components as ``(w, x, y, z)``."""
        return (self.w, self.x, self.y, self.z)

    def to_xyzw(self) -> tuple[float, float, float, float]:
        """Components as ``(x, y, z, w)``, the order :meth:`from_sequence` reads."""
        return (self.x, self.y, self.z, self.w)

    def to_array(self) -> np.ndarray:
        """Float32 array ``[w, x, y, z]``."""
        return np.array([self._w, self._x, self._y, self._z], dtype=np.float32)

    def to_bytes(self) -> bytes:
        return np.array([(self._w, self._x, self._y, self._z)], dtype=QUATERNION_DTYPE).tobytes()

    def format(self, spec: str | None = None, number_format: NumberFormat | None = None) -> str:
        """
        Render as ``"w, x, y, z"``.

        :param spec: Format specification for every component, e.g. ``'.3f'``.
            None or ``'G'`` selects the shortest float32 form.
        :param number_format: Separators to use, defaults to the current locale.
            Components are joined by its group separator and one space.
        """
        return format_components((self._w, self._x, self._y, self._z), spec, number_format)

    def __str__(self) -> str:
        return self.format()

    def __format__(self, spec: str) -> str:
        return self.format(spec or None)

    def __repr__(self) -> str:
        return f'Quaternion(w={self.w!r}, x={self.x!r}, y={self.y!r}, z={self.z!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (
            self._x == other._x
            and self._y == other._y
            and self._z == other._z
            and self._w == other._w
        )

    def __hash__(self) -> int:
        return hash_components((self._x, self._y, self._z, self._w))

    def __mul__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return rotate(self, other)

    def __copy__(self) -> 'Quaternion':
        return self

    def __deepcopy__(self, memo: dict) -> 'Quaternion':
        return self

    def __reduce__(self) -> tuple:
        return (Quaternion, self.as_tuple())


Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)
Quaternion.IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)


def rotate(q: Quaternion, v: Vector3 | Any) -> Vector3:
    """
    Rotate ``v`` by ``q`` without building a rotation matrix.

    Expands ``q * v * q^-1`` for a unit quaternion as
    ``v + 2w(qv x v) + 2(qv x (qv x v))`` with ``qv = (x, y, z)``.
    ``q`` is not normalized; NaN and infinity propagate.

    :param q: Rotation, expected to have unit length.
    :param v: Vector3 or any ``(x, y, z)`` sequence.
    :return: Rotated vector.
    """
    if not isinstance(v, Vector3):
        v = Vector3.from_sequence(v)

    qvec = Vector3(q._x, q._y, q._z)
    uv = qvec.cross(v)
    uuv = qvec.cross(uv)

    return v + uv * (_TWO * q._w) + uuv * _TWO
