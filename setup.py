#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'tqdm']
test_requires = ['tox', 'pytest']
perf_requires = ['tabulate']

setup(
    name='fntransduce',
    version='0.1.0',
    packages=['fntransduce'],
    install_requires = requires,
    extras_require = {
      'test': test_requires,
      'perf': perf_requires,
    },
    license='Artistic-2.0',
    description='composable transducers: map, filter and friends decoupled from where the data goes.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: Artistic License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
