import logging

import pytest

from rotkit.formatting import NumberFormat
from rotkit.quaternion import Quaternion
from rotkit.settings import SettingFormat, Settings, load_settings
from rotkit.utils.exceptions import ConfigError
from rotkit.utils.logging import LogLevel
from rotkit.utils.settings import SettingRotation, SettingVector
from rotkit.vector import Vector3


def test_setting_rotation_both_quaternion_and_euler():
    """Test SettingRotation raises error when both quaternion and euler_deg are provided."""
    with pytest.raises(ValueError, match="Provide either 'quaternion' or 'euler_deg', not both"):
        SettingRotation(quaternion=(0.0, 0.0, 0.7071068, 0.7071068), euler_deg=(0.0, 0.0, 90.0))


def test_setting_rotation_default_is_identity():
    assert SettingRotation().to_quaternion() == Quaternion.IDENTITY


def test_setting_rotation_quaternion_is_xyzw():
    q = SettingRotation(quaternion=(0.5, -0.5, 0.25, 0.75)).to_quaternion()

    assert q.as_tuple() == (0.75, 0.5, -0.5, 0.25)


def test_setting_rotation_from_euler():
    setting = SettingRotation(euler_deg=(0.0, 0.0, 90.0))

    assert setting.quaternion == pytest.approx((0.0, 0.0, 0.7071068, 0.7071068), abs=1e-6)
    assert tuple(setting.to_quaternion() * Vector3.UNIT_X) == pytest.approx((0.0, 1.0, 0.0), abs=1e-6)


def test_setting_vector():
    assert SettingVector(x=1.0, z=3.0).to_vector() == Vector3(1.0, 0.0, 3.0)


def test_setting_format_defaults_to_invariant():
    assert SettingFormat().number_format() == NumberFormat.invariant()


def test_setting_format_overrides():
    nf = SettingFormat(group_separator='.', decimal_separator=',').number_format()

    assert nf == NumberFormat(group_separator='.', decimal_separator=',')


def test_setting_format_uses_locale(monkeypatch):
    monkeypatch.setattr('locale.localeconv', lambda: {'thousands_sep': ' ', 'decimal_point': ','})

    nf = SettingFormat(use_locale=True).number_format()

    assert nf == NumberFormat(group_separator=' ', decimal_separator=',')


def test_setting_format_warns_on_ambiguous_separators(caplog):
    with caplog.at_level(logging.WARNING, logger='rotkit.settings'):
        SettingFormat(group_separator='.').number_format()

    assert 'ambiguous' in caplog.text


def test_load_settings():
    settings = load_settings(
        {
            'log_level': 'DEBUG',
            'rotation': {'quaternion': [1.0, 0.0, 0.0, 0.0]},
            'format': {'spec': '.2f'},
        }
    )

    assert isinstance(settings, Settings)
    assert settings.log_level == LogLevel.DEBUG
    assert settings.rotation.to_quaternion() == Quaternion(0.0, 1.0, 0.0, 0.0)
    assert settings.format.spec == '.2f'


def test_load_settings_invalid():
    with pytest.raises(ConfigError) as exc_info:
        load_settings(
            {'rotation': {'quaternion': [0.0, 0.0, 1.0, 0.0], 'euler_deg': [0.0, 0.0, 90.0]}}
        )

    assert exc_info.value.message == 'Invalid settings'
    assert any('rotation' in err for err in exc_info.value.details['errors'])


def test_load_settings_wrong_quaternion_length():
    with pytest.raises(ConfigError):
        load_settings({'rotation': {'quaternion': [0.0, 0.0, 1.0]}})


@pytest.mark.parametrize('quaternion', [5, 3.5, 'abcd'])
def test_load_settings_non_sequence_quaternion_with_euler(quaternion):
    with pytest.raises(ConfigError):
        load_settings({'rotation': {'quaternion': quaternion, 'euler_deg': [0.0, 0.0, 90.0]}})


def test_load_settings_non_sequence_quaternion():
    with pytest.raises(ConfigError):
        load_settings({'rotation': {'quaternion': 5}})


def test_setting_rotation_identity_quaternion_yields_to_euler():
    setting = SettingRotation(quaternion=(0.0, 0.0, 0.0, 1.0), euler_deg=(0.0, 0.0, 90.0))

    assert setting.quaternion == pytest.approx((0.0, 0.0, 0.7071068, 0.7071068), abs=1e-6)
