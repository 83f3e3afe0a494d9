"""Config related settings, follows 12factor.net
"""
import logging
import os
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)

__all__ = [
    'Setting',
    'setting_unlocked',
    'configure_environment',
    ]


class Setting(dict):
    """Dict where d['foo'] can also be accessed as d.foo
    but also automatically creates new sub-attributes of
    type Setting. This behavior can be locked to turn off
    later. WARNING: not copy safe

    >>> cfg = Setting()
    >>> cfg.unlock() # locked after config.py load

    >>> cfg.foo.bar = 1
    >>> hasattr(cfg.foo, 'bar')
    True
    >>> cfg.foo.bar
    1
    >>> cfg.lock()
    >>> cfg.foo.bar = 2
    Traceback (most recent call last):
     ...
    ValueError: This Setting object is locked from editing
    >>> cfg.unlock()
    """

    _locked = False

    def __init__(self, *args, **kwargs):
        dict.__init__(self, *args, **kwargs)

    def __getattr__(self, name):
        """Create sub-setting fields on the fly"""
        if name not in self:
            if self._locked:
                raise ValueError('This Setting object is locked from editing')
            self[name] = Setting()
        return self[name]

    def __setattr__(self, name, val):
        if self._locked:
            raise ValueError('This Setting object is locked from editing')
        self[name] = val

    @staticmethod
    def lock():
        Setting._locked = True

    @staticmethod
    def unlock():
        Setting._locked = False


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in {'0', 'false', 'no', 'off', ''}


# iteration

iteration = Setting()
iteration.checked = _env_flag('CONFIG_ITERATION_CHECKED', True)

# render

render = Setting()
render.separator = ' '

# log

log = Setting()
log.level = os.getenv('CONFIG_LOG_LEVEL', 'WARNING')

Setting.lock()


@contextmanager
def setting_unlocked(setting: Setting):
    """Context manager to safely modify a setting with unlock/lock protection.

    Parameters
        setting: The Setting object to unlock/lock
    """
    setting.unlock()
    try:
        yield
    finally:
        setting.lock()


def configure_environment(module, **config_overrides: Any) -> None:
    """Configure environment settings at runtime.

    Dynamically sets configuration values on Setting objects in the provided module.
    Keys should follow the pattern 'setting_attribute' or 'setting_nested_attribute'.

    >>> import chainset.config
    >>> configure_environment(chainset.config, iteration_checked=False)
    >>> chainset.config.iteration.checked
    False
    >>> configure_environment(chainset.config, iteration_checked=True)

    Parameters
        module: The module containing Setting objects to configure
        **config_overrides: Configuration values to set with keys as dotted paths

    Returns
        None
    """
    for key, value in config_overrides.items():
        parts = key.split('_')

        setting_obj = None
        attr_parts = []

        for i in range(1, len(parts) + 1):
            setting_name = '_'.join(parts[:i])
            if hasattr(module, setting_name):
                setting_obj = getattr(module, setting_name)
                attr_parts = parts[i:]
                break

        logger.debug(f'Processing config key: {key} -> setting_obj found: {setting_obj is not None}')

        if setting_obj is None:
            logger.debug(f'No setting object found for key: {key}')
            continue

        if not isinstance(setting_obj, Setting):
            logger.debug(f'Found object for key {key} is not a Setting instance')
            continue

        if not attr_parts:
            logger.debug(f'Key {key} matches setting name exactly, cannot set value')
            continue

        with setting_unlocked(setting_obj):
            target = setting_obj
            for part in attr_parts[:-1]:
                target = getattr(target, part)
                logger.debug(f'Navigated to attribute: {part}')

            logger.debug(f'Setting {key} = {value} on target object')
            setattr(target, attr_parts[-1], value)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
