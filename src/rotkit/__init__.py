__version__ = '0.1.0'

from rotkit.formatting import NumberFormat  # noqa: E402
from rotkit.quaternion import QUATERNION_DTYPE, SIZE_IN_BYTES, Quaternion, rotate  # noqa: E402
from rotkit.vector import Vector2, Vector3, Vector4  # noqa: E402

__all__ = [
    '__version__',
    'NumberFormat',
    'QUATERNION_DTYPE',
    'SIZE_IN_BYTES',
    'Quaternion',
    'rotate',
    'Vector2',
    'Vector3',
    'Vector4',
]
