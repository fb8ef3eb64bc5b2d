#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt']
test_requires = ['pytest', 'tabulate']

setup(
    name='xduce',
    version='0.1.0',
    author='Andrew Thomson',
    author_email='athomsonguy@gmail.com',
    packages=['xduce'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {'test': test_requires},
    entry_points = {
      'console_scripts': [
        'xduce = xduce.ui:ui_main',
        ],
    },
    url='http://github.com/andrewguy9/xduce',
    license='MIT',
    description='composable transducers which fuse map, filter, enumerate, limit and each into a single pass.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
