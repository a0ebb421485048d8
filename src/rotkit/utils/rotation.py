"""Rotation utilities using numpy for batches of 3D points."""

import numpy as np

from rotkit.quaternion import Quaternion


def euler_to_quaternion(
    euler_angles: tuple[float, float, float], *, degrees: bool = True
) -> Quaternion:
    """
    Convert Euler angles (XYZ intrinsic) to a quaternion.

    :param euler_angles: Tuple of (roll, pitch, yaw) angles.
    :param degrees: If True, input angles are in degrees; otherwise radians.
    :return: Unit quaternion.
    """
    roll, pitch, yaw = euler_angles

    if degrees:
        roll = np.radians(roll)
        pitch = np.radians(pitch)
        yaw = np.radians(yaw)

    # Half angles
    cr = np.cos(roll * 0.5)
    sr = np.sin(roll * 0.5)
    cp = np.cos(pitch * 0.5)
    sp = np.sin(pitch * 0.5)
    cy = np.cos(yaw * 0.5)
    sy = np.sin(yaw * 0.5)

    # XYZ intrinsic: R = Rx(roll) @ Ry(pitch) @ Rz(yaw)
    w = cr * cp * cy - sr * sp * sy
    x = sr * cp * cy + cr * sp * sy
    y = cr * sp * cy - sr * cp * sy
    z = cr * cp * sy + sr * sp * cy

    return Quaternion(float(w), float(x), float(y), float(z))


def rotate_points(points: np.ndarray, quaternion: Quaternion) -> np.ndarray:
    """
    Apply a quaternion rotation to an array of 3D points.

    Same expansion as :func:`rotkit.quaternion.rotate`, vectorized over rows
    and evaluated in float64. ``quaternion`` is not normalized.

    :param points: Nx3 numpy array of points.
    :param quaternion: Rotation, expected to have unit length.
    :return: Rotated points as Nx3 numpy array.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 3:  # noqa: PLR2004
        raise ValueError(f'points must have shape (N, 3), got {points.shape}')

    qvec = np.array([quaternion.x, quaternion.y, quaternion.z], dtype=np.float64)

    uv = np.cross(qvec, points)
    uuv = np.cross(qvec, uv)

    return points + uv * (2.0 * quaternion.w) + uuv * 2.0
