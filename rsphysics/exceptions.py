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
All exceptions used within RSPhysics.

"""

class RSPhysicsException(Exception):
    pass

class PreconditionViolation(RSPhysicsException, ValueError):
    "An input falls outside its documented physical domain"

class PostconditionViolation(RSPhysicsException, ArithmeticError):
    "A computed result does not satisfy its documented guarantee"

class OutOfDomain(RSPhysicsException, LookupError):
    "No band of the instrument table matches the wavelength"

class DegenerateInput(RSPhysicsException, ArithmeticError):
    """A derived denominator or logarithm argument is zero or undefined.

    Raised for inputs that look valid one by one but make the closed form
    singular, e.g. a brightness temperature equal to the atmospheric
    temperature, collinear trilateration centres or a zero beam solid angle.
    """

class ConfigurationException(RSPhysicsException):
    "Configuration file missing, unreadable or holding invalid values"


def assert_required_keywords_provided(keywords, **kwargs):
    """
    This method checks if all the required keyword arguments to complete a computation
        are provided in **kwargs
    Args:
        keywords ([list[str]], optional): Required keywords.
    Raises:
        ConfigurationException: a required keyword is missing or None
    """
    for keyword in keywords:
        if keyword not in kwargs or kwargs[keyword] is None:
            message = (
                f"Keyword argument {keyword} must be provided for this computation "
            )
            raise ConfigurationException(message)
