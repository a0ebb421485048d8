import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from rotkit.formatting import NumberFormat
from rotkit.utils.exceptions import ConfigError
from rotkit.utils.logging import LogLevel
from rotkit.utils.settings import SettingRotation

logger = logging.getLogger(__name__)


class SettingFormat(BaseModel, frozen=True):
    """
    Text rendering settings.

    Explicit separators override the ones taken from the locale.

    :ivar spec: Python format specification for each component, e.g. '.3f'.
        None renders the shortest float32 form.
    :ivar use_locale: Take separators from the current process locale instead
        of the invariant ',' and '.'.
    :ivar group_separator: Separator placed (followed by a space) between components.
    :ivar decimal_separator: Decimal point.
    """

    spec: str | None = None
    use_locale: bool = False
    group_separator: str | None = None
    decimal_separator: str | None = None

    def number_format(self) -> NumberFormat:
        base = NumberFormat.current() if self.use_locale else NumberFormat.invariant()
        overrides = {
            k: v
            for k, v in (
                ('group_separator', self.group_separator),
                ('decimal_separator', self.decimal_separator),
            )
            if v is not None
        }
        if not overrides:
            return base

        nf = base.model_copy(update=overrides)
        if nf.group_separator == nf.decimal_separator:
            logger.warning(
                'group and decimal separator are both %r, output is ambiguous',
                nf.group_separator,
            )
        return nf


class Settings(BaseModel, frozen=True):
    """
    Settings.

    :ivar log_level: Minimum level of log messages.
    :ivar rotation: Rotation to show or apply.
    :ivar format: Text rendering settings.
    """

    log_level: LogLevel = LogLevel.INFO
    rotation: SettingRotation = SettingRotation()
    format: SettingFormat = SettingFormat()


def load_settings(data: Mapping[str, Any]) -> Settings:
    """
    Validate a settings mapping.

    :raises ConfigError: If the mapping does not describe valid settings.
    """
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigError('Invalid settings', {'errors': errors}) from e
