from pydantic import BaseModel, model_validator

from rotkit.quaternion import Quaternion
from rotkit.utils.rotation import euler_to_quaternion
from rotkit.vector import Vector3

IDENTITY_XYZW = (0.0, 0.0, 0.0, 1.0)


class SettingRotation(BaseModel, frozen=True):
    """
    Rotation settings.

    Setting euler_deg together with a non-identity quaternion is an error.
    With the default (identity) quaternion, euler_deg replaces it.

    :ivar quaternion: Quaternion to apply, ordered (x, y, z, w).
    :ivar euler_deg: Euler angles (XYZ intrinsic) to apply.
    """

    quaternion: tuple[float, float, float, float] = IDENTITY_XYZW
    euler_deg: tuple[float, float, float] | None = None

    @model_validator(mode='before')
    @classmethod
    def _check_mutual_exclusive(cls, data: dict) -> dict:
        """
        Ensure that either 'quaternion' or 'euler_deg' is provided, but not both.
        """
        if not isinstance(data, dict):
            return data

        q = data.get('quaternion')
        e = data.get('euler_deg')

        # anything but an identity list/tuple counts as supplied, field validation rejects junk
        is_identity = isinstance(q, (list, tuple)) and tuple(q) == IDENTITY_XYZW
        q_supplied = q is not None and not is_identity
        e_supplied = e is not None

        if q_supplied and e_supplied:
            raise ValueError("Provide either 'quaternion' or 'euler_deg', not both.")
        return data

    @model_validator(mode='after')
    def _derive_quaternion(self) -> 'SettingRotation':
        if self.euler_deg is not None:
            quat = euler_to_quaternion(self.euler_deg, degrees=True)
            # model is frozen - bypass immutability for derived field
            object.__setattr__(self, 'quaternion', quat.to_xyzw())
        return self

    def to_quaternion(self) -> Quaternion:
        return Quaternion.from_sequence(self.quaternion)


class SettingVector(BaseModel, frozen=True):
    """
    Vector settings.

    :ivar x: X component.
    :ivar y: Y component.
    :ivar z: Z component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_vector(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)
