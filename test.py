#!/usr/bin/env python
# python 3.6+

# Testing of lexer, parser and syntax tree traversal: text -> tokens -> AST.

import math
import unittest

from cxast import AST, BindVar
from cxlex import LexError, ParseError
from cxparser import Parser
import cxplugins

parser = Parser ()
p      = lambda s: parser.parse (s)
toks   = lambda s: [(str (t), t.text) for t in parser.tokenize (s)]

x, y, z, w = ('@', 'x'), ('@', 'y'), ('@', 'z'), ('@', 'w')

class Test (unittest.TestCase):
	def test_tokenize (self):
		self.assertEqual (toks ('2+3.5*x'), [('REAL', '2'), ('PLUSMINUS', '+'), ('REAL', '3.5'), ('MULDIVREM', '*'), ('VAR', 'x'), ('$end', '')])
		self.assertEqual (toks ('2.i % I - i'), [('IMAG', '2.i'), ('MULDIVREM', '%'), ('IMAG', 'I'), ('PLUSMINUS', '-'), ('IMAG', 'i'), ('$end', '')])
		self.assertEqual (toks ('2in'), [('REAL', '2'), ('VAR', 'in'), ('$end', '')])
		self.assertEqual (toks ('sin(x)^y'), [('FUNC1', 'sin'), ('PARENL', '('), ('VAR', 'x'), ('PARENR', ')'), ('RAISED', '^'), ('VAR', 'y'), ('$end', '')])
		self.assertEqual (toks ('inflect(a,b)'), [('FUNC2', 'inflect'), ('PARENL', '('), ('VAR', 'a'), ('COMMA', ','), ('VAR', 'b'), ('PARENR', ')'), ('$end', '')])
		self.assertEqual (toks ('der'), [('FUNCD', 'der'), ('$end', '')])
		self.assertEqual (toks ('sine x_1'), [('VAR', 'sine'), ('VAR', 'x_1'), ('$end', '')])
		self.assertEqual (toks ('   '), [('$end', '')])

	def test_token_positions (self):
		tokens = parser.tokenize ('x +  12')

		self.assertEqual ([t.pos for t in tokens], [0, 2, 5, 7])
		self.assertEqual (tokens [2].grp, ('12',))

	def test_lex_errors (self):
		with self.assertRaises (LexError) as cm:
			p ('2 $ 3')

		self.assertEqual ((cm.exception.text, cm.exception.pos), ('$', 2))
		self.assertRaises (LexError, p, '.5')
		self.assertRaises (LexError, p, '1e5.')
		self.assertRaises (LexError, p, '[1]')
		self.assertTrue (issubclass (LexError, ParseError))
		self.assertTrue (issubclass (ParseError, SyntaxError))

	def test_values (self):
		self.assertEqual (p ('2'), AST ('#', 2.))
		self.assertEqual (p ('2.5'), AST ('#', 2.5))
		self.assertEqual (p ('3.'), AST ('#', 3.))
		self.assertEqual (p ('2.5i'), AST ('-imag', 2.5))
		self.assertEqual (p ('i'), AST ('-imag', 1.))
		self.assertEqual (p ('I'), AST ('-imag', 1.))
		self.assertEqual (p ('x'), AST ('@', 'x'))
		self.assertEqual (p ('x_1'), AST ('@', 'x_1'))
		self.assertEqual (p ('pi'), AST ('#', math.pi))
		self.assertEqual (p ('PI'), AST ('#', math.pi))
		self.assertEqual (p ('e'), AST ('#', math.e))
		self.assertEqual (p ('E'), AST ('#', math.e))
		self.assertEqual (p ('Phi'), AST ('#', (1 + math.sqrt (5)) / 2))
		self.assertEqual (p ('pie'), AST ('@', 'pie'))

	def test_chains (self):
		self.assertEqual (p ('x+y-z'), AST ('+', ((x, '+'), (y, '+'), (z, '-'))))
		self.assertEqual (p ('x*y/z%w'), AST ('*', ((x, '*'), (y, '*'), (z, '/'), (w, '%'))))
		self.assertEqual (p ('x+y*z'), AST ('+', ((x, '+'), (('*', ((y, '*'), (z, '*'))), '+'))))
		self.assertEqual (p ('(x+y)*z'), AST ('*', ((('+', ((x, '+'), (y, '+'))), '*'), (z, '*'))))
		self.assertEqual (p ('(x+y)+z'), AST ('+', ((x, '+'), (y, '+'), (z, '+'))))
		self.assertEqual (p ('(x*y)/z'), AST ('*', ((x, '*'), (y, '*'), (z, '/'))))
		self.assertEqual (p ('x/(y*z)'), AST ('*', ((x, '*'), (('*', ((y, '*'), (z, '*'))), '/'))))
		self.assertEqual (p ('x-(y-z)'), AST ('+', ((x, '+'), (('+', ((y, '+'), (z, '-'))), '-'))))

	def test_unary_signs (self):
		self.assertEqual (p ('-x'), AST ('+', ((x, '-'),)))
		self.assertEqual (p ('+x'), AST ('@', 'x'))
		self.assertEqual (p ('--x'), AST ('@', 'x'))
		self.assertEqual (p ('---x'), AST ('+', ((x, '-'),)))
		self.assertEqual (p ('-------2'), AST ('+', ((('#', 2.), '-'),)))
		self.assertEqual (p ('----------2'), AST ('#', 2.))
		self.assertEqual (p ('-' * 5000 + '2'), AST ('#', 2.))
		self.assertEqual (p ('-x+y'), AST ('+', ((x, '-'), (y, '+'))))
		self.assertEqual (p ('x+-y'), AST ('+', ((x, '+'), (('+', ((y, '-'),)), '+'))))
		self.assertEqual (p ('x*-y'), AST ('*', ((x, '*'), (('+', ((y, '-'),)), '*'))))
		self.assertEqual (p ('-x*y'), AST ('+', ((('*', ((x, '*'), (y, '*'))), '-'),)))
		self.assertEqual (p ('-(x+y)'), AST ('+', ((('+', ((x, '+'), (y, '+'))), '-'),)))

	def test_power (self):
		self.assertEqual (p ('x^y'), AST ('^', x, y))
		self.assertEqual (p ('2^3^2'), AST ('^', ('#', 2.), ('^', ('#', 3.), ('#', 2.))))
		self.assertEqual (p ('(2^3)^2'), AST ('^', ('^', ('#', 2.), ('#', 3.)), ('#', 2.)))
		self.assertEqual (p ('2^-x'), AST ('^', ('#', 2.), ('+', ((x, '-'),))))
		self.assertEqual (p ('2^+x'), AST ('^', ('#', 2.), x))
		self.assertEqual (p ('-2^2'), AST ('+', ((('^', ('#', 2.), ('#', 2.)), '-'),)))
		self.assertEqual (p ('2*x^2'), AST ('*', ((('#', 2.), '*'), (('^', x, ('#', 2.)), '*'))))

	def test_functions (self):
		self.assertEqual (p ('sin(x)'), AST ('-func', 'sin', x))
		self.assertEqual (p ('ln(x)'), AST ('-func', 'log', x))
		self.assertEqual (p ('sin(x)^2'), AST ('^', ('-func', 'sin', x), ('#', 2.)))
		self.assertEqual (p ('sin(cos(x))'), AST ('-func', 'sin', ('-func', 'cos', x)))
		self.assertEqual (p ('inflect(x, 2)'), AST ('-func2', 'inflect', x, ('#', 2.)))
		self.assertEqual (p ('add(x, y+1)'), AST ('-func2', 'add', x, ('+', ((y, '+'), (('#', 1.), '+')))))
		self.assertEqual (p ('der(x^2, x)'), AST ('-diff', 'der', ('^', x, ('#', 2.)), x))
		self.assertEqual (p ('der(x, (x))'), AST ('-diff', 'der', x, x))
		self.assertEqual (p ('newton(x, +x)'), AST ('-diff', 'newton', x, x))

		self.assertIs (p ('sin(x)').func, parser.tokenize ('sin') [0].grp [0])

	def test_parse_errors (self):
		self.assertRaisesRegex (ParseError, 'unexpected end of input', p, '(1+2')
		self.assertRaisesRegex (ParseError, 'unexpected end of input', p, '1+')
		self.assertRaisesRegex (ParseError, "unknown function 'foo'", p, 'foo(1)')
		self.assertRaisesRegex (ParseError, "unknown function 'pi'", p, 'pi(1)')
		self.assertRaisesRegex (ParseError, 'no input', p, '')
		self.assertRaisesRegex (ParseError, 'no input', p, '  ')
		self.assertRaisesRegex (ParseError, "unexpected symbol '2'", p, '1 2')
		self.assertRaisesRegex (ParseError, "unexpected symbol '\\)'", p, '1+2)')
		self.assertRaisesRegex (ParseError, "unexpected symbol '\\)'", p, 'inflect(1)')
		self.assertRaisesRegex (ParseError, "unexpected symbol ','", p, 'sin(1, 2)')
		self.assertRaisesRegex (ParseError, "unexpected symbol '1'", p, 'sin 1')
		self.assertRaisesRegex (ParseError, "unexpected symbol '\\*'", p, '*2')
		self.assertRaisesRegex (ParseError, 'must be a variable', p, 'der(x, 2)')
		self.assertRaisesRegex (ParseError, 'must be a variable', p, 'der(x, -x)')
		self.assertRaisesRegex (ParseError, 'must be a variable', p, 'der(x, (x+1))')

		with self.assertRaises (ParseError) as cm:
			p ('x + foo(2)')

		self.assertEqual ((cm.exception.text, cm.exception.pos), ('foo', 4))

	def test_nesting_limit (self):
		n = Parser.MAX_DEPTH - 1

		self.assertEqual (p ('(' * n + 'x' + ')' * n), AST ('@', 'x'))
		self.assertRaisesRegex (ParseError, 'nested too deeply', p, '(' * 200 + 'x' + ')' * 200)
		self.assertRaisesRegex (ParseError, 'nested too deeply', p, 'sin(' * 200 + 'x' + ')' * 200)
		self.assertRaisesRegex (ParseError, 'nested too deeply', p, '2^' * 200 + '2')

	def test_accept (self):
		nodes = []

		p ('x+sin(y)*inflect(z,w)').accept (nodes.append)

		self.assertEqual ([a.op for a in nodes], ['+', '@', '*', '-func', '@', '-func2', '@', '@'])
		self.assertEqual ([a.var for a in nodes if a.is_var], ['x', 'y', 'z', 'w'])

		nodes = []

		p ('der(x^2, x)').accept (nodes.append)

		self.assertEqual ([a.op for a in nodes], ['-diff', '^', '@', '#', '@'])

	def test_bind (self):
		ast  = p ('x*x+y+X')
		vars = []

		ast.accept (BindVar ('x', 2))
		ast.accept (lambda a: a.is_var and vars.append ((a.var, a.val)))

		self.assertEqual (vars, [('x', 2), ('x', 2), ('y', None), ('X', None)])
		self.assertEqual (ast.free_vars, {'x', 'y', 'X'})
		self.assertTrue (ast.has_var ('X'))
		self.assertFalse (ast.has_var ('z'))

		ast.bind ('x', None)
		self.assertFalse (any (a.val is not None for a in (ast.add [0] [0].mul [0] [0], ast.add [0] [0].mul [1] [0])))

	def test_bind_per_tree (self):
		ast1, ast2 = p ('x^2'), p ('x^2')

		ast1.bind ('x', 3)

		self.assertEqual (ast1, ast2)
		self.assertEqual (ast1.base.val, 3)
		self.assertIsNone (ast2.base.val)
		self.assertIsNot (ast1.base, ast2.base)

if __name__ == '__main__':
	unittest.main ()
