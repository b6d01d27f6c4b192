#!/usr/bin/env python3

import setuptools

setuptools.setup (
  name                          = "cxpad",
  version                       = "1.0.0",
  license                       = 'BSD',
  keywords                      = "Math complex parser derivative SymPy",
  description                   = "Complex number expression parser and evaluator with forward mode differentiation",
  long_description              = "cxpad parses textual math expressions over the complex numbers into a tuple based syntax tree and evaluates them. "
    "Variables are bound per tree, a large library of elementary, special and geometric complex functions is available "
    "and derivative functions evaluate analytic derivatives of sub-expressions with rules generated by SymPy.",
  long_description_content_type = "text/plain",
  py_modules                    = ['cxast', 'cxeval', 'cxfuncs', 'cxlex', 'cxnum', 'cxpad', 'cxparser', 'cxplugins'],
  entry_points                  = {'console_scripts': ['cxpad = cxpad:main']},
  classifiers                   = [
    'Intended Audience :: Education',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Scientific/Engineering :: Mathematics',
  ],
  install_requires              = ['sympy>=1.4', 'mpmath'],
  python_requires               = '>=3.6',
)
