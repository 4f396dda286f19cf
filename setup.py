#!/usr/bin/env python

import re
from setuptools import setup


with open('shuffledsearch/__init__.py') as f:
  line = f.readline()
  match = re.search(r'= *[\'"](.*)[\'"]', line)
  version = match.group(1)

setup(name='shuffledsearch',
      version=version,
      description='in-place median-first layout for binary search that only reads forward in memory',
      license = "BSD",
      keywords = "binary search shuffle cache locality sorted array in-place permutation sortedset",
      packages=['shuffledsearch', 'shuffledsearch.test'],
      provides = ['shuffledsearch'],
      python_requires='>=3.6',
      zip_safe = True,
      classifiers = [
            'Development Status :: 4 - Beta',
            'Intended Audience :: Developers',
            'Intended Audience :: Science/Research',
            'License :: OSI Approved :: BSD License',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            ],
      long_description=open('README.rst').read()
)
