#!/usr/bin/env python

# Project skeleton maintained at https://github.com/jaraco/skeleton

import setuptools

name = 'irc-textevents'
description = 'Formatting of IRC client text events through user templates'

params = dict(
    name=name,
    version='1.0.0',
    author="Joel Rosdahl",
    author_email="joel@rosdahl.net",
    maintainer="Jason R. Coombs",
    maintainer_email="jaraco@jaraco.com",
    description=description or name,
    url="https://github.com/jaraco/" + name,
    packages=setuptools.find_packages(),
    package_data={'textevents': ['events.txt']},
    python_requires='>=3.9',
    install_requires=[
        'jaraco.collections',
        'jaraco.text>=3.11',
        'jaraco.logging',
        'jaraco.functools>=1.20',
        'more_itertools',
    ],
    extras_require={
        'testing': [
            # upstream
            'pytest>=6',
            'pytest-sugar>=0.9.1',
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Communications :: Chat :: Internet Relay Chat",
    ],
    entry_points={
        'console_scripts': [
            'textevents = textevents.cli:main',
        ],
    },
)
if __name__ == '__main__':
    setuptools.setup(**params)
