# -*- coding: utf-8 -*-
import sys

from setuptools import setup, find_packages

# Avoids IDE errors, but actual version is read from version.py
__version__ = ""
exec(open('cmdbuilder/version.py').read())

if sys.version_info < (3,):
    sys.exit('Sorry, Python3 is required.')

with open('README.md', 'r', encoding='utf-8') as f:
    readme = f.read()

setup(
    name='pycmdbuilder',
    version=__version__,
    description='cmdbuilder: build and run shell command lines',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='XuMing',
    author_email='xuming624@qq.com',
    url='https://github.com/shibing624/cmdbuilder',
    license='Apache License 2.0',
    zip_safe=False,
    python_requires='>=3.8.0',
    entry_points={"console_scripts": ["cmdbuilder = cmdbuilder.cli:main"]},
    classifiers=[
        'Intended Audience :: Developers',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Shells',
        'Topic :: Utilities',
    ],
    keywords='cmdbuilder,command-line,shell,quote,subprocess',
    install_requires=[
        "loguru",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=find_packages(exclude=['tests', 'examples']),
    package_dir={'cmdbuilder': 'cmdbuilder'},
    package_data={'cmdbuilder': ['*.*']}
)
