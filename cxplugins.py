# Sample plugin functions, registered with the function tables on import.

import math

import sympy as sp

import cxfuncs
import cxnum

_PHI   = (1 + math.sqrt (5)) / 2
_Z, _W = sp.symbols ('z w')

def add (a, b):
	return a + b

def dist2 (a, b): # squared distance between a and b as points in the plane
	d = a - b

	return complex (d.real * d.real + d.imag * d.imag, 0)

def fib (z): # Binet's formula continued to the complex plane, integer z gives Fibonacci numbers
	return (_PHI ** z - cxnum.cos (math.pi * z) * _PHI ** -z) / math.sqrt (5)

_sphi = (1 + sp.sqrt (5)) / 2

cxfuncs.register_func2 ('add', add, _Z + _W)
cxfuncs.register_func2 ('dist2', dist2)
cxfuncs.register_func1 ('fib', fib, (_sphi ** _Z - sp.cos (sp.pi * _Z) * _sphi ** -_Z) / sp.sqrt (5))
