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

""" Contract decorators.

Preconditions and postconditions are attached to plain functions::

    @requires(lambda wavelength: wavelength > 0, "Wavelength must be greater than zero")
    @ensures(lambda ret: ret > 0)
    def em_frequency(wavelength):
        return C_SPEED / wavelength

A precondition predicate names the arguments it inspects; they are bound by
name (defaults applied) before the call. Comparisons against NaN are false,
so NaN arguments fail every precondition.
"""
import inspect
import logging
import wrapt

from rsphysics.exceptions import PreconditionViolation, PostconditionViolation

LOG = logging.getLogger(__name__)


def _bind(func, args, kwargs):
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    return bound.arguments


def requires(predicate, message=None):
    """Check `predicate` on the named arguments before calling.

    Raises:
        PreconditionViolation: predicate is false
    """
    names = list(inspect.signature(predicate).parameters)

    @wrapt.decorator
    def wrapper(wrapped, instance, args, kwargs):
        arguments = _bind(wrapped, args, kwargs)
        values = [arguments[name] for name in names]
        try:
            satisfied = bool(predicate(*values))
        except (TypeError, ValueError) as err:
            raise PreconditionViolation(
                f"{wrapped.__name__}: invalid arguments {dict(zip(names, values))}: {err}") from err
        if not satisfied:
            detail = message or "precondition failed"
            raise PreconditionViolation(
                f"{wrapped.__name__}: {detail} (got {dict(zip(names, values))})")
        return wrapped(*args, **kwargs)

    return wrapper


def ensures(predicate, message=None):
    """Check `predicate` on the return value.

    Raises:
        PostconditionViolation: predicate is false
    """
    @wrapt.decorator
    def wrapper(wrapped, instance, args, kwargs):
        ret = wrapped(*args, **kwargs)
        if not predicate(ret):
            detail = message or "postcondition failed"
            LOG.debug("%s returned %r", wrapped.__name__, ret)
            raise PostconditionViolation(f"{wrapped.__name__}: {detail} (got {ret!r})")
        return ret

    return wrapper


def positive(*values):
    """True if every value is a number greater than zero."""
    return all(v > 0 for v in values)
