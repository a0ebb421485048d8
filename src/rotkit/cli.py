import sys
from typing import Any

from jsonargparse import CLI

from rotkit import __version__
from rotkit.quaternion import SIZE_IN_BYTES, rotate
from rotkit.settings import Settings, SettingFormat, load_settings
from rotkit.utils.error_handling import handle_errors
from rotkit.utils.logging import LogLevel, get_logger, setup_logging
from rotkit.vector import Vector3

logger = get_logger(__name__)


class RotkitCLI:
    def __init__(
        self,
        *,
        log_level: LogLevel = LogLevel.INFO,
        format: SettingFormat | None = None,  # noqa: A002
    ) -> None:
        """general options
        :ivar log_level: Minimum level of log messages
        :ivar format: Text rendering of numbers (spec, separators, locale)
        """
        setup_logging(log_level)
        self.log_level = log_level
        self.format = format if format is not None else SettingFormat()

    def _settings(
        self,
        quaternion: tuple[float, float, float, float] | None,
        euler_deg: tuple[float, float, float] | None,
    ) -> Settings:
        rotation: dict[str, Any] = {}
        if quaternion is not None:
            rotation['quaternion'] = quaternion
        if euler_deg is not None:
            rotation['euler_deg'] = euler_deg

        return load_settings(
            {
                'log_level': self.log_level,
                'rotation': rotation,
                'format': self.format.model_dump(),
            }
        )

    def _render(self, value: Any, settings: Settings) -> str:
        fmt = settings.format
        return value.format(fmt.spec, fmt.number_format())

    @handle_errors()
    def show(
        self,
        *,
        quaternion: tuple[float, float, float, float] | None = None,
        euler_deg: tuple[float, float, float] | None = None,
    ) -> None:
        """Print a rotation as "w, x, y, z" with its length.

        Args:
            quaternion: Rotation ordered (x, y, z, w).
            euler_deg: Rotation as XYZ intrinsic Euler angles in degrees.
        """
        settings = self._settings(quaternion, euler_deg)
        q = settings.rotation.to_quaternion()

        print('Rotation:      ', self._render(q, settings))  # noqa: T201
        print('Length:        ', q.length())  # noqa: T201
        print('LengthSquared: ', q.length_squared())  # noqa: T201

        if abs(q.length() - 1.0) > 1e-6:  # noqa: PLR2004
            logger.warning('Rotation is not unit length (%s), rotated vectors are scaled', q.length())

    @handle_errors()
    def rotate(
        self,
        vector: tuple[float, float, float],
        *,
        quaternion: tuple[float, float, float, float] | None = None,
        euler_deg: tuple[float, float, float] | None = None,
    ) -> None:
        """Rotate a vector and print the result as "x, y, z".

        Args:
            vector: Vector to rotate.
            quaternion: Rotation ordered (x, y, z, w).
            euler_deg: Rotation as XYZ intrinsic Euler angles in degrees.
        """
        settings = self._settings(quaternion, euler_deg)
        q = settings.rotation.to_quaternion()
        v = Vector3.from_sequence(vector)

        logger.debug('Rotating %r by %r', v, q)
        print(self._render(rotate(q, v), settings))  # noqa: T201

    @handle_errors()
    def pack(
        self,
        *,
        quaternion: tuple[float, float, float, float] | None = None,
        euler_deg: tuple[float, float, float] | None = None,
    ) -> None:
        """Print the binary (w, x, y, z) float32 layout of a rotation as hex.

        Args:
            quaternion: Rotation ordered (x, y, z, w).
            euler_deg: Rotation as XYZ intrinsic Euler angles in degrees.
        """
        settings = self._settings(quaternion, euler_deg)
        data = settings.rotation.to_quaternion().to_bytes()

        logger.debug('Packed %d bytes', SIZE_IN_BYTES)
        print(data.hex())  # noqa: T201

    def version(self) -> None:
        print('Rotkit: ', __version__)  # noqa: T201
        print('Python: ', sys.version)  # noqa: T201


def main() -> None:
    CLI(RotkitCLI, version=__version__)


if __name__ == '__main__':
    main()
