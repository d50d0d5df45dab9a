# SPDX-License-Identifier: FSFAP
# Copyright (C) 2025 The Leaderboard Project Developers
#
# Copying and distribution of this file, with or without modification,
# are permitted in any medium without royalty provided the copyright
# notice and this notice are preserved.  This file is offered as-is,
# without any warranty.

import os
from setuptools import setup, find_packages

# This directory
dir_setup = os.path.dirname(os.path.realpath(__file__))

with open(os.path.join(dir_setup, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

with open(os.path.join(dir_setup, "leaderboard", "version.py")) as f:
    # Defines __version__
    exec(f.read())

install_requires = [
    "peewee>=3.13.3",
    "PyMySQL>=1.0.2",
    "tabulate",
    'tomli>=2.0.1 ; python_version<"3.11"',
]

test_requires = [
    "pytest",
]


setup(
    name="leaderboard",
    version=__version__,  # noqa: F821
    description="Students, competitions and results, with leaderboards",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="AGPLv3+",
    python_requires=">=3.9",
    packages=find_packages(include=["leaderboard", "leaderboard.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)",
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "Topic :: Education",
    ],
    entry_points={
        "console_scripts": [
            "leaderboard=leaderboard.__main__:main",
        ],
    },
    include_package_data=True,
    package_data={"leaderboard": ["leaderboardConfig.toml"]},
    install_requires=install_requires,
    extras_require={"test": test_requires},
)
