# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('cacheobject', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='cacheobject',
    version=metadata['version'],
    description='Parser for the HTTP Cache-Control response header',
    long_description=long_description,
    url=metadata['homepage'],
    license='MIT',

    python_requires='>=3.7',
    install_requires=[
        'bitstring >= 3.1.4',
        'dominate >= 2.2.0',
    ],
    extras_require={
        'test': [
            'pytest >= 3.0',
        ],
    },

    packages=[
        'cacheobject',
        'cacheobject.known',
        'cacheobject.reports',
        'cacheobject.syntax',
        'cacheobject.util',
    ],
    package_data={
        'cacheobject.reports': ['html.css'],
    },
    entry_points={
        'console_scripts': [
            'cacheobject=cacheobject.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
    ],
    keywords='HTTP Cache-Control header parser RFC 7234',
)
