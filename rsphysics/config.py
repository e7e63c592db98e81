# -*- coding:utf-8 -*-
# Copyright (c) 2021-2022.

################################################################
# The contents of this file are subject to the GPLv3 License
# you may not use this file except in
# compliance with the License. You may obtain a copy of the License at
# https://www.gnu.org/licenses/gpl-3.0.en.html

# Software distributed under the License is distributed on an "AS IS"
# basis, WITHOUT WARRANTY OF ANY KIND, either express or implied. See the
# License for the specific language governing rights and limitations
# under the License.

# The Original Code is part of the RSPhysics python package.

# Initial Dev of the Original Code is Jinshun Zhu, PhD Student,
# Institute of Remote Sensing and Geographic Information System,
# Peking Universiy Copyright (C) 2022
# All Rights Reserved.

# Contributor(s): Jinshun Zhu (created, refactored and updated original code).
###############################################################

"""
Configuration.
==============

Built-in defaults live in ``etc/config.yaml``. They are updated, in order, by
the user file ``config.yaml`` in the platform user config directory and by
the file named by the ``RSPHYSICS_CONFIG`` environment variable.
"""

import os
import logging
import yaml
from collections.abc import Mapping
from appdirs import AppDirs

from rsphysics.exceptions import ConfigurationException, assert_required_keywords_provided

LOG = logging.getLogger(__name__)

BUILTIN_CONFIG_FILE = os.path.join(os.path.dirname(os.path.realpath(__file__)),
                                   'etc', 'config.yaml')

USER_CONFIG_FILE = os.path.join(AppDirs('rsphysics', 'rsphysics').user_config_dir,
                                'config.yaml')

CONFIG_FILE = os.environ.get('RSPHYSICS_CONFIG')

if CONFIG_FILE is not None and (not os.path.exists(CONFIG_FILE) or
                                not os.path.isfile(CONFIG_FILE)):
    raise ConfigurationException(
        str(CONFIG_FILE) + " pointed to by the environment " +
        "variable RSPHYSICS_CONFIG is not a file or does not exist!")


def recursive_dict_update(d, u):
    """Recursive dictionary update.

    Copied from:

        http://stackoverflow.com/questions/3232943/update-value-of-a-nested-dictionary-of-varying-depth

    """
    for k, v in u.items():
        if isinstance(v, Mapping):
            r = recursive_dict_update(d.get(k, {}), v)
            d[k] = r
        else:
            d[k] = u[k]
    return d


def load_config_file(configfile):
    """Read one YAML configuration file into a dict."""
    try:
        with open(configfile, 'r', encoding='utf-8') as fp_:
            content = yaml.safe_load(fp_)
    except (OSError, yaml.YAMLError) as err:
        raise ConfigurationException(f"unable to read configuration {configfile}: {err}") from err
    if content is None:
        return {}
    if not isinstance(content, Mapping):
        raise ConfigurationException(f"configuration {configfile} is not a mapping")
    return content


def get_config(config_files=None):
    """Get the configuration from file.

    Args:
        config_files: extra files layered over the built-in one, later files
            win. Defaults to the user config file (when present) and
            ``$RSPHYSICS_CONFIG``.

    Returns:
        merged configuration dict
    """
    if config_files is None:
        config_files = [f for f in (USER_CONFIG_FILE, CONFIG_FILE)
                        if f is not None and os.path.isfile(f)]
    config = load_config_file(BUILTIN_CONFIG_FILE)
    for configfile in config_files:
        LOG.debug("Updating configuration from %s", configfile)
        config = recursive_dict_update(config, load_config_file(configfile))
    return config


def _positive(section, key):
    value = float(section[key])
    if not value > 0:
        raise ConfigurationException(f"configuration value {key} must be positive, got {value}")
    return value


CFG = get_config()

# integration
assert_required_keywords_provided(['step', 'coarse_step'], **CFG['integration'])
INTEGRATION_STEP = _positive(CFG['integration'], 'step')
COARSE_INTEGRATION_STEP = _positive(CFG['integration'], 'coarse_step')

# split window
assert_required_keywords_provided(['a0', 'a1', 'a2'], **CFG['split_window'])
SPLIT_WINDOW_COEFFS = {k: float(CFG['split_window'][k]) for k in ('a0', 'a1', 'a2')}

# microwave
assert_required_keywords_provided(['c', 'del_t', 'del_f'], **CFG['microwave']['sensitivity'])
SENSITIVITY_DEFAULTS = {k: _positive(CFG['microwave']['sensitivity'], k)
                        for k in ('c', 'del_t', 'del_f')}

# ranged
AIRBORNE_KEYS = ['rise_time', 'snr', 'velocity', 'height', 'prf', 'beam_width']
assert_required_keywords_provided(AIRBORNE_KEYS, **CFG['ranged']['airborne'])
AIRBORNE_RANGING = {k: _positive(CFG['ranged']['airborne'], k) for k in AIRBORNE_KEYS}

# photographic
RADIAL_DISTORTION_SLOPE = float(CFG['photographic']['radial_distortion_slope'])

# debug&logging

def debug_on():
    """Turn debugging logging on."""
    logging_on(logging.DEBUG)


_console = None


def logging_on(level=logging.WARNING):
    """Send the package log records to stderr at `level`."""
    global _console

    log = logging.getLogger('rsphysics')
    if _console is None:
        _console = logging.StreamHandler()
        _console.setFormatter(logging.Formatter("[%(levelname)s: %(asctime)s :"
                                                " %(name)s] %(message)s",
                                                '%Y-%m-%d %H:%M:%S'))
        log.addHandler(_console)
    _console.setLevel(level)
    log.setLevel(level)


def logging_off():
    """Remove the console handler added by :func:`logging_on`."""
    global _console

    log = logging.getLogger('rsphysics')
    if _console is not None:
        log.removeHandler(_console)
        _console = None
    log.setLevel(logging.NOTSET)
