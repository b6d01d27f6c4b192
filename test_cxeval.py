#!/usr/bin/env python
# python 3.6+

# Testing of evaluation, variable binding, differentiation and AST -> native text.

import cmath
import math
import unittest

from cxast import EvaluationError
from cxeval import ast2val, ast2dval, ast2nat, complex2nat, evaluate, set_strict
from cxfuncs import FUNCS1, FUNCS2
from cxparser import parse
import cxnum
import cxplugins

def v (text, **vars):
	return evaluate (parse (text), vars)

class Test (unittest.TestCase):
	def test_precedence (self):
		self.assertEqual (v ('2+3*4'), 14)
		self.assertEqual (v ('(2+3)*4'), 20)
		self.assertEqual (v ('2^3^2'), 512)
		self.assertEqual (v ('(2^3)^2'), 64)
		self.assertEqual (v ('2*3^2'), 18)
		self.assertEqual (v ('-2^2'), -4)
		self.assertEqual (v ('2^-1'), .5)
		self.assertEqual (v ('8/2/2'), 2)
		self.assertEqual (v ('2-3-4'), -5)
		self.assertEqual (v ('2-(3-4)'), 3)

	def test_unary_signs (self):
		self.assertEqual (v ('-------2'), -2)
		self.assertEqual (v ('----------2'), 2)
		self.assertEqual (v ('-------2++++++-+++++i'), -2-1j)
		self.assertEqual (v ('2*-3'), -6)
		self.assertEqual (v ('-(1-3)'), 2)

	def test_mixed (self):
		self.assertEqual (v ('2i*(1+sin(pi/2))^2-3.0i'), 5j)
		self.assertEqual (v ('+12/+3++4^+4/-2*+3/-2+-24/+3*+8/-2*+cos(0)+-(+10/-2-+3*-5)'), 218)
		self.assertEqual (v ('12/3+4^4/(-2)*3/(-2)-24/3*8/(-2)*cos(0)-(10/(-2)-3*(-5))'), 218)
		self.assertEqual (v ('i^2'), -1)
		self.assertEqual (v ('(1+i)*(1-i)'), 2)

	def test_remainder (self):
		self.assertEqual (v ('3%-4'), -1)
		self.assertEqual (v ('7%3'), 1)
		self.assertEqual (v ('-7%3'), -1)
		self.assertEqual (v ('(-7)%3'), 2)
		self.assertEqual (v ('2*7%3'), 2)
		self.assertAlmostEqual (v ('(0.4+1.3i) % (0.6-3.33i)'), cxnum.rem (0.4+1.3j, 0.6-3.33j))

	def test_functions1 (self):
		self.assertEqual (v ('sqrt(-4)'), 2j)
		self.assertEqual (v ('exp(0)'), 1)
		self.assertEqual (v ('log(1)'), 0)
		self.assertEqual (v ('ln(1)'), 0)
		self.assertAlmostEqual (v ('log10(100)'), 2)
		self.assertAlmostEqual (v ('log2(8)'), 3)
		self.assertEqual (v ('abs(-3-4i)'), 3+4j)
		self.assertEqual (v ('absre(-3-4i)'), 3-4j)
		self.assertEqual (v ('absim(-3-4i)'), -3+4j)
		self.assertEqual (v ('norm(3+4i)'), 5)
		self.assertAlmostEqual (v ('arg(i)'), math.pi / 2)
		self.assertEqual (v ('re(2+3i)'), 2)
		self.assertEqual (v ('im(2+3i)'), 3)
		self.assertEqual (v ('conj(2+3i)'), 2-3j)
		self.assertEqual (v ('flip(2+3i)'), 3+2j)
		self.assertEqual (v ('rec(4)'), .25)
		self.assertEqual (v ('floor(2.5-1.5i)'), 2-2j)
		self.assertEqual (v ('ceil(2.5-1.5i)'), 3-1j)
		self.assertEqual (v ('trunc(2.5-1.5i)'), 2-1j)
		self.assertEqual (v ('round(2.5-1.5i)'), 3-1j)
		self.assertEqual (v ('gi(2.5-1.5i)'), 3-2j)
		self.assertAlmostEqual (v ('fact(5)'), 120)
		self.assertAlmostEqual (v ('gamma(0.5)^2'), math.pi)
		self.assertEqual (v ('erf(0)'), 0)
		self.assertAlmostEqual (v ('rzeta(2)'), math.pi ** 2 / 6)

	def test_inverses (self):
		pairs = (('sin', 'asin'), ('cot', 'acot'), ('sec', 'asec'), ('csc', 'acsc'), ('coth', 'acoth'), ('sech', 'asech'), ('csch', 'acsch'),
			('vsin', 'avsin'), ('vcos', 'avcos'), ('cvsin', 'acvsin'), ('cvcos', 'acvcos'), ('hvsin', 'ahvsin'), ('hvcos', 'ahvcos'),
			('hcvsin', 'ahcvsin'), ('hcvcos', 'ahcvcos'), ('exsec', 'aexsec'), ('excsc', 'aexcsc'))

		for f, af in pairs:
			self.assertAlmostEqual (v (f'{af}({f}(0.5))'), 0.5, msg = af)

	def test_functions2 (self):
		self.assertEqual (v ('inflect(5i,218)'), cxnum.inflect (5j, 218))
		self.assertEqual (v ('inflect(5i,218)'), 47717-2180j)
		self.assertEqual (v ('foldu(1-2i, 0)'), 1+2j)
		self.assertEqual (v ('foldu(1+2i, 0)'), 1+2j)
		self.assertEqual (v ('foldd(1+2i, 0)'), 1-2j)
		self.assertEqual (v ('foldl(3, 1)'), -1)
		self.assertEqual (v ('foldr(-1, 1)'), 3)
		self.assertEqual (v ('foldi(0.5, 1)'), 2)
		self.assertEqual (v ('foldo(2, 1)'), .5)
		self.assertEqual (v ('shear(1+2i, 3+4i)'), 7+6j)
		self.assertEqual (v ('cmp(1, 2)'), 1)
		self.assertEqual (v ('cmp(2, 1)'), -1)
		self.assertEqual (v ('cmp(1+i, 1+2i)'), 1)
		self.assertEqual (v ('cmp(1+i, 1+i)'), 0)
		self.assertAlmostEqual (v ('ibipol(bipol(1+0.5i, 2), 2)'), 1+.5j)
		self.assertEqual (v ('add(1+i, 2)'), 3+1j)
		self.assertEqual (v ('dist2(1+i, 4+5i)'), 25)
		self.assertAlmostEqual (v ('fib(10)'), 55)
		self.assertAlmostEqual (v ('fib(20)'), 6765, places = 5)

	def test_deterministic (self):
		ast = parse ('sin(1)+gamma(0.3i)*erf(1+i)')

		self.assertEqual (ast2val (ast), ast2val (ast))

	def test_binding (self):
		ast = parse ('x*2+y')

		self.assertEqual (evaluate (ast, {'x': 1, 'y': 1j}), 2+1j)
		self.assertEqual (ast2val (ast), 2+1j) # bound values persist
		self.assertEqual (evaluate (ast, {'y': 0}), 2)

		ast1, ast2 = parse ('x^2'), parse ('x^2')

		ast1.bind ('x', 3)
		ast2.bind ('x', 1j)

		self.assertEqual (ast2val (ast1), 9)
		self.assertEqual (ast2val (ast2), -1)

	def test_unbound (self):
		self.assertRaisesRegex (EvaluationError, "variable 'x' is not bound", v, 'x+1')
		self.assertRaisesRegex (EvaluationError, "variable 'X' is not bound", v, 'x+X', x = 1)

		ast = parse ('x')

		ast.bind ('x', 1)
		ast.bind ('x', None)

		self.assertRaises (EvaluationError, ast2val, ast)

	def test_numeric_errors (self):
		self.assertRaises (EvaluationError, v, '1/0')
		self.assertRaises (EvaluationError, v, '1%0')
		self.assertRaises (EvaluationError, v, 'log(0)')
		self.assertRaises (EvaluationError, v, '0^-1')
		self.assertRaises (EvaluationError, v, 'cot(0)')
		self.assertRaises (EvaluationError, v, 'gamma(0)')
		self.assertRaises (EvaluationError, v, 'x/(x-1)', x = 1)

	def test_strict (self):
		self.assertEqual (v ('10^300*10^300'), complex (math.inf, 0))

		set_strict (True)

		try:
			self.assertRaisesRegex (EvaluationError, 'not finite', v, '10^300*10^300')
			self.assertEqual (v ('2+2'), 4)
		finally:
			set_strict (False)

	def test_derivative (self):
		self.assertEqual (v ('der(x^3, x)', x = 2), 12)
		self.assertEqual (v ('der(x*x*x, x)', x = 2), 12)
		self.assertEqual (v ('der(1/x, x)', x = 2), -.25)
		self.assertEqual (v ('der(-x + 3*x - 2, x)', x = 5), 2)
		self.assertEqual (v ('der(x*y, x)', x = 5, y = 3), 3)
		self.assertEqual (v ('der(y, x)', x = 5, y = 3), 0)
		self.assertEqual (v ('der(2, x)', x = 5), 0)
		self.assertAlmostEqual (v ('der(sin(x), x)', x = 0), 1)
		self.assertAlmostEqual (v ('der(sin(x^2), x)', x = 1), 2 * math.cos (1))
		self.assertAlmostEqual (v ('der(exp(2*x), x)', x = 0), 2)
		self.assertAlmostEqual (v ('der(x^x, x)', x = 1), 1)
		self.assertAlmostEqual (v ('der(2^x, x)', x = 3), 8 * math.log (2))
		self.assertAlmostEqual (v ('der(log(x)/x, x)', x = 1j), (1 - cmath.log (1j)) / (1j * 1j))
		self.assertAlmostEqual (v ('1 + der(x^2, x) * i', x = 1+1j), 1 + (2+2j) * 1j)

	def test_derivative_functions2 (self):
		self.assertAlmostEqual (v ('der(inflect(x, 2), x)', x = 3), 2)
		self.assertAlmostEqual (v ('der(inflect(1, x), x)', x = 3), 5)
		self.assertAlmostEqual (v ('der(add(x, x^2), x)', x = 3), 7)
		self.assertAlmostEqual (v ('der(bipol(x, 2), x)', x = 1), -1j / cmath.sin (.5) ** 2)
		self.assertRaisesRegex (EvaluationError, 'argument 2', v, 'der(bipol(1, x), x)', x = 2)

	def test_derivative_variants (self):
		self.assertEqual (v ('newton(x^2-2, x)', x = 1), 1.5)
		self.assertEqual (v ('dlog(x^3, x)', x = 2), 1.5)
		self.assertRaises (EvaluationError, v, 'newton(x-x+1, x)', x = 1)

	def test_derivative_errors (self):
		self.assertRaisesRegex (EvaluationError, "variable 'x' is not bound", v, 'der(x^2, x)')
		self.assertRaisesRegex (EvaluationError, 'has no derivative', v, 'der(abs(x), x)', x = 1)
		self.assertRaisesRegex (EvaluationError, 'has no derivative', v, 'der(cmp(x, 1), x)', x = 1)
		self.assertRaisesRegex (EvaluationError, 'remainder', v, 'der(x%2, x)', x = 1)
		self.assertRaises (EvaluationError, v, 'der(der(x^3, x), x)', x = 2)
		self.assertEqual (v ('der(x*abs(-2), x)', x = 1), 2)
		self.assertEqual (v ('der(x*(5%3), x)', x = 1), 2)
		self.assertEqual (v ('der(x*der(y^2, y), x)', x = 5, y = 3), 6)

	def test_derivative_rules (self): # generated derivatives against central differences
		z, h = .3+.2j, 1e-6

		for name in ('sqrt', 'exp', 'log', 'log10', 'log2', 'sin', 'cos', 'tan', 'cot', 'sec', 'csc', 'sinh', 'cosh', 'tanh', 'coth', 'sech', 'csch',
				'asin', 'acos', 'atan', 'acot', 'asec', 'acsc', 'asinh', 'acosh', 'atanh', 'acoth', 'asech', 'acsch', 'rec', 'gamma', 'fact', 'erf',
				'rzeta', 'vsin', 'vcos', 'cvsin', 'cvcos', 'hvsin', 'hvcos', 'hcvsin', 'hcvcos', 'exsec', 'excsc', 'avsin', 'avcos', 'acvsin',
				'acvcos', 'ahvsin', 'ahvcos', 'ahcvsin', 'ahcvcos', 'aexsec', 'aexcsc', 'fib'):
			f = FUNCS1 [name]

			self.assertAlmostEqual (v (f'der({name}(x), x)', x = z), (f (z + h) - f (z - h)) / (2 * h), places = 5, msg = name)

		f = FUNCS2 ['inflect']

		self.assertAlmostEqual (ast2dval (parse ('inflect(x, 1+i)'), 'x', z) [1], (f (z + h, 1+1j) - f (z - h, 1+1j)) / (2 * h), places = 5)

	def test_ast2dval (self):
		ast = parse ('x^2+y')

		ast.bind ('y', 1)

		self.assertEqual (ast2dval (ast, 'x', 3), (10, 6))
		self.assertRaises (EvaluationError, ast2dval, ast, 'y')

		ast.bind ('x', 3)

		self.assertEqual (ast2dval (ast, 'y'), (10, 1))
		self.assertEqual (ast2dval (ast, 'x'), (10, 6))

		ast = parse ('der(x^2, x)')

		ast.bind ('x', 3)

		ast.dvar.val = 2 # point of evaluation is taken from the variable argument

		self.assertEqual (ast2val (ast), 4)
		self.assertEqual (ast.diff.base.val, 3)

	def test_ast2nat (self):
		self.assertEqual (ast2nat (parse ('2+3*4')), '2 + 3*4')
		self.assertEqual (ast2nat (parse ('-x^2')), '-x^2')
		self.assertEqual (ast2nat (parse ('(x+y)*z')), '(x + y)*z')
		self.assertEqual (ast2nat (parse ('2^3^2')), '2^3^2')
		self.assertEqual (ast2nat (parse ('(2^3)^2')), '(2^3)^2')
		self.assertEqual (ast2nat (parse ('x*-y')), 'x*(-y)')
		self.assertEqual (ast2nat (parse ('2^-x')), '2^(-x)')
		self.assertEqual (ast2nat (parse ('x % 2/y')), 'x%2/y')
		self.assertEqual (ast2nat (parse ('sin(x)+inflect(2.5i, i)')), 'sin(x) + inflect(2.5i, i)')
		self.assertEqual (ast2nat (parse ('der(x^2,(x))')), 'der(x^2, x)')
		self.assertEqual (ast2nat (parse ('ln(x)')), 'log(x)')
		self.assertEqual (ast2nat (parse ('pi')), '3.141592653589793')
		self.assertEqual (ast2nat (parse ('0.0000001')), '0.0000001')

		for text in ('-------2', 'x-(y-z)', 'a/(b*c)', '(a*b)/c', '-(a+b)', '2^-3^2', '(-2)^2', '-(-x)', '1 - -x', 'x + -y', '-x + y',
				'sin(-x)^-2', 'fib(2.5i)*dist2(x, -y)', 'newton(x^3 - 1, x)'):
			self.assertEqual (parse (ast2nat (parse (text))), parse (text), msg = text)

	def test_complex2nat (self):
		self.assertEqual (complex2nat (-1+0j), '-1+0i')
		self.assertEqual (complex2nat (2.5-3j), '2.5-3i')
		self.assertEqual (complex2nat (complex (0, -0.)), '0+0i')
		self.assertEqual (complex2nat (complex (math.inf, 0)), 'inf+0i')

if __name__ == '__main__':
	unittest.main ()
