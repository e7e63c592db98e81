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


"""Setup file for rsphysics.
"""
from setuptools import setup, find_packages

NAME = 'rsphysics'
with open('README.md', 'r', encoding='utf-8') as readme:
    README = readme.read()


requires = [
    'numpy>=1.20',
    'scipy>=1.6',
    'scikit-learn>=1.0',
    'PyYAML>=5.4.1',
    'appdirs>=1.4.4',
    'wrapt>=1.12',
]

test_requires = ['pytest>=6.0']

extras_require = {
    'doc': ['sphinx'],
    'test': test_requires,
}
all_extras = []
for extra_deps in extras_require.values():
    all_extras.extend(extra_deps)
extras_require['all'] = list(set(all_extras))

setup(
    name=NAME,
    version='0.1.0',
    keywords='remote sensing radiometry microwave photogrammetry',
    description='Remote sensing physics formulas',
    long_description=README,
    long_description_content_type="text/markdown",
    license='GPLv3',
    packages=find_packages(include=['rsphysics', 'rsphysics.*']),
    include_package_data=True,
    package_data={
        'rsphysics': ['etc/*.yml', 'etc/*.yaml'],
    },
    platforms='any',
    zip_safe=False,
    install_requires=requires,
    tests_require=test_requires,
    python_requires='>=3.7',
    extras_require=extras_require,
    )
