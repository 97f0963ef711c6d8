# -*- coding: utf-8 -*-

from setuptools import setup
from glob import glob

REQUIRED = []
with open('requirements.txt') as f:
    REQUIRED = f.read().splitlines()

FEATURE_DEPS = {}

for feature_file in glob("*.requirements.txt"):
    feature, _ = feature_file.split(".", 1)

    with open(feature_file) as f:
        FEATURE_DEPS[feature] = f.read().splitlines()

VERSION = open("version.txt").read().strip()
LONG_DESCRIPTION = open("README.rst").read()

setup(
    name="ResGraph",
    install_requires=REQUIRED,
    version=VERSION,
    packages=['resgraph'],
    description="Identity, graph binding and initialization hooks for RDF"
                " resources",
    long_description=LONG_DESCRIPTION,
    license="BSD 3-clause",
    python_requires='>=3.6',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database'],
    extras_require=FEATURE_DEPS,
    zip_safe=False
)
