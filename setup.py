#!/usr/bin/env python3
import os
import re

from setuptools import setup, find_packages


def main():
    os.chdir(os.path.dirname(os.path.realpath(__file__)))

    with open('clocker/__init__.py', 'r') as file:
        version = re.search(r"^__version__\s*=\s*'(.*)'", file.read(), re.M).group(1)

    with open('README', 'rb') as f:
        long_descr = f.read().decode('utf-8')

    setup(
        name='clocker',
        version=version,
        packages=find_packages(exclude=['tests']),
        python_requires='>=3.7',
        install_requires=[
            'toml',
            'arrow',
            'appdirs',
            'dateparser',
        ],
        extras_require={
            'test': ['pytest', 'python-dateutil'],
        },
        entry_points={
            'console_scripts': [
                'clocker = clocker.clock:main',
            ],
        },
        long_description=long_descr,
        license='MIT',
        description='Record daily clock-in and clock-out times in a CSV file',
    )


if __name__ == "__main__":
    main()
