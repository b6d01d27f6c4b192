# Complex number functions for the evaluator, arguments and results are Python complex.
# Domain failures propagate as ZeroDivisionError, ValueError or OverflowError.

import cmath
import math

import mpmath

_LOG10E = 0.43429448190325182765
_LOG2E  = 1.442695040888963407360

def _cpx (f): # wrap mpmath function to return Python complex
	return lambda z: complex (f (z))

def _comp (f, z): # apply real function per component
	return complex (f (z.real), f (z.imag))

#...............................................................................................
def rem (a, b): # a - b * floor (a / b), floor per component
	return a - b * _comp (math.floor, a / b)

def pow (a, b):
	return a ** b

#...............................................................................................
exp   = cmath.exp
log   = cmath.log
sqrt  = cmath.sqrt

def log10 (z): return cmath.log (z) * _LOG10E
def log2 (z):  return cmath.log (z) * _LOG2E

sin   = cmath.sin
cos   = cmath.cos
tan   = cmath.tan
sinh  = cmath.sinh
cosh  = cmath.cosh
tanh  = cmath.tanh
asin  = cmath.asin
acos  = cmath.acos
atan  = cmath.atan
asinh = cmath.asinh
acosh = cmath.acosh
atanh = cmath.atanh

def cot (z):   return cmath.cos (z) / cmath.sin (z)
def sec (z):   return 1 / cmath.cos (z)
def csc (z):   return 1 / cmath.sin (z)
def coth (z):  return cmath.cosh (z) / cmath.sinh (z)
def sech (z):  return 1 / cmath.cosh (z)
def csch (z):  return 1 / cmath.sinh (z)
def acot (z):  return cmath.atan (1 / z)
def asec (z):  return cmath.acos (1 / z)
def acsc (z):  return cmath.asin (1 / z)
def acoth (z): return cmath.atanh (1 / z)
def asech (z): return cmath.acosh (1 / z)
def acsch (z): return cmath.asinh (1 / z)

#...............................................................................................
def re (z):    return complex (z.real, 0)
def im (z):    return complex (z.imag, 0)
def norm (z):  return complex (abs (z), 0)
def arg (z):   return complex (cmath.phase (z), 0)
def conj (z):  return z.conjugate ()
def flip (z):  return complex (z.imag, z.real)
def rec (z):   return 1 / z

def abs_ (z):  return complex (abs (z.real), abs (z.imag))
def absre (z): return complex (abs (z.real), z.imag)
def absim (z): return complex (z.real, abs (z.imag))

def floor (z): return _comp (math.floor, z)
def ceil (z):  return _comp (math.ceil, z)
def trunc (z): return _comp (math.trunc, z)
def round_ (z): return _comp (lambda x: math.floor (x + 0.5), z) # half up
def gi (z):    return _comp (lambda x: math.trunc (x - 0.5 if x < 0 else x + 0.5), z) # nearest gaussian integer, half away from zero

gamma = _cpx (mpmath.gamma)
erf   = _cpx (mpmath.erf)
rzeta = _cpx (mpmath.zeta)

def fact (z):
	return gamma (z + 1)

#...............................................................................................
def vsin (z):    return 1 - cmath.cos (z)
def vcos (z):    return 1 + cmath.cos (z)
def cvsin (z):   return 1 - cmath.sin (z)
def cvcos (z):   return 1 + cmath.sin (z)
def hvsin (z):   return vsin (z) / 2
def hvcos (z):   return vcos (z) / 2
def hcvsin (z):  return cvsin (z) / 2
def hcvcos (z):  return cvcos (z) / 2
def exsec (z):   return sec (z) - 1
def excsc (z):   return csc (z) - 1

def avsin (z):   return cmath.acos (1 - z)
def avcos (z):   return cmath.acos (z - 1)
def acvsin (z):  return cmath.asin (1 - z)
def acvcos (z):  return cmath.asin (z - 1)
def ahvsin (z):  return 2 * cmath.asin (cmath.sqrt (z))
def ahvcos (z):  return 2 * cmath.acos (cmath.sqrt (z))
def ahcvsin (z): return cmath.asin (1 - 2 * z)
def ahcvcos (z): return cmath.asin (2 * z - 1)
def aexsec (z):  return asec (z + 1)
def aexcsc (z):  return acsc (z + 1)

#...............................................................................................
def bipol (z, a): # bipolar coordinates with foci at +-a, a real
	return 1j * a.real * cot (z / 2)

def ibipol (z, a):
	return 2 * acot (z / (1j * a.real))

def inflect (z, p):
	return p + (z - p) ** 2

def foldu (z, p):
	return complex (z.real, 2 * p.imag - z.imag) if z.imag < p.imag else z

def foldd (z, p):
	return complex (z.real, 2 * p.imag - z.imag) if z.imag > p.imag else z

def foldl (z, p):
	return complex (2 * p.real - z.real, z.imag) if z.real > p.real else z

def foldr (z, p):
	return complex (2 * p.real - z.real, z.imag) if z.real < p.real else z

def _norm2 (z):
	return z.real * z.real + z.imag * z.imag

def foldi (z, p):
	n = _norm2 (z)

	return z / n if n < _norm2 (p) else z

def foldo (z, p):
	n = _norm2 (z)

	return z / n if n > _norm2 (p) else z

def shear (z, s):
	return complex (z.real + z.imag * s.real, z.imag + z.real * s.imag)

def cmp (a, b): # lexicographic on (re, im), 2 if unordered (nan)
	for x, y in ((a.real, b.real), (a.imag, b.imag)):
		if x > y:
			return complex (-1, 0)
		elif x < y:
			return complex (1, 0)
		elif x != y:
			return complex (2, 0)

	return 0j
