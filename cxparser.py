# Builds expression tree from text by recursive descent with one token lookahead, nodes are nested AST tuples.

from collections import OrderedDict
import os
import sys

from cxlex import Token, Lexer, ParseError
from cxast import AST
import cxfuncs

#...............................................................................................
class Parser (Lexer):
	MAX_DEPTH = 100 # maximum nesting of factors (parentheses, function arguments, exponents)

	TOKENS    = OrderedDict ([ # order matters
		('IMAG',      r'(\d+(?:\.\d*)?)?[iI](?!\w)'),
		('REAL',      r'(\d+(?:\.\d*)?)'),
		('VAR',       r'([a-zA-Z]\w*)'),
		('PLUSMINUS', r'[+-]'),
		('MULDIVREM', r'[*/%]'),
		('RAISED',    r'\^'),
		('PARENL',    r'\('),
		('PARENR',    r'\)'),
		('COMMA',     r','),
		('ignore',    r'\s+'),
	])

	def tokenize (self, text): # identifiers which name a registered function become FUNC1, FUNC2 or FUNCD carrying the resolved function
		tokens = Lexer.tokenize (self, text)

		for i, tok in enumerate (tokens):
			if tok == 'VAR':
				kind = cxfuncs.lookup (tok.text)

				if kind:
					tokens [i] = Token (kind [0], tok.text, tok.pos, (kind [1],))

		return tokens

	#...............................................................................................
	def next (self):
		self.tokidx += 1
		self.tok     = self.tokens [self.tokidx]

	def error (self, msg = None, tok = None):
		tok = tok or self.tok

		if msg is None:
			msg = 'unexpected end of input' if tok == '$end' else f'unexpected symbol {tok.text!r}'

		raise ParseError (msg, tok.text, tok.pos)

	def expect (self, kind):
		tok = self.tok

		if tok != kind:
			self.error ()

		self.next ()

		return tok

	def signs (self): # consume run of unary signs, True if odd number of '-'
		neg = False

		while self.tok == 'PLUSMINUS':
			neg ^= self.tok.text == '-'

			self.next ()

		return neg

	#...............................................................................................
	def expression (self):
		ast = self.signed_term ()

		while self.tok == 'PLUSMINUS':
			sign = self.tok.text

			self.next ()

			term = self.signed_term ()
			ast  = AST ('+', (ast.add if ast.is_add else ((ast, '+'),)) + ((term, sign),))

		return ast

	def signed_term (self):
		neg = self.signs ()
		ast = self.term ()

		return AST ('+', ((ast, '-'),)) if neg else ast

	def term (self):
		ast = self.factor ()

		while self.tok == 'MULDIVREM':
			mode = self.tok.text

			self.next ()

			fact = self.signed_factor ()
			ast  = AST ('*', (ast.mul if ast.is_mul else ((ast, '*'),)) + ((fact, mode),))

		return ast

	def signed_factor (self):
		neg = self.signs ()
		ast = self.factor ()

		return AST ('+', ((ast, '-'),)) if neg else ast

	def factor (self):
		self.depth += 1

		if self.depth > self.MAX_DEPTH:
			self.error ('expression nested too deeply')

		ast = self.argument ()

		if self.tok == 'RAISED':
			self.next ()

			ast = AST ('^', ast, self.signed_factor ()) # exponent recursion makes '^' right associative

		self.depth -= 1

		return ast

	def argument (self):
		tok = self.tok

		if tok == 'FUNC1':
			self.next ()
			self.expect ('PARENL')

			arg = self.expression ()

			self.expect ('PARENR')

			return AST ('-func', tok.grp [0], arg)

		if tok in {'FUNC2', 'FUNCD'}:
			self.next ()
			self.expect ('PARENL')

			arg1 = self.expression ()

			self.expect ('COMMA')

			tok2 = self.tok
			arg2 = self.expression ()

			self.expect ('PARENR')

			if tok == 'FUNC2':
				return AST ('-func2', tok.grp [0], arg1, arg2)

			if not arg2.is_var:
				self.error (f'second argument of {tok.text!r} must be a variable', tok2)

			return AST ('-diff', tok.grp [0], arg1, arg2)

		if tok == 'PARENL':
			self.next ()

			ast = self.expression ()

			self.expect ('PARENR')

			return ast

		return self.value ()

	def value (self):
		tok = self.tok

		if tok == 'REAL':
			self.next ()

			return AST ('#', float (tok.text))

		if tok == 'IMAG':
			self.next ()

			return AST ('-imag', float (tok.grp [0]) if tok.grp [0] else 1.)

		if tok == 'VAR':
			self.next ()

			if self.tok == 'PARENL':
				self.error (f'unknown function {tok.text!r}', tok)

			const = AST.CONSTS.get (tok.text.lower ()) # pi, e, phi in any case

			return AST ('@', tok.text) if const is None else AST ('#', const.num)

		self.error ()

	#...............................................................................................
	def parse (self, text):
		self.tokens = self.tokenize (text)
		self.tokidx = 0
		self.tok    = self.tokens [0]
		self.depth  = 0

		if os.environ.get ('CXPAD_DEBUG'):
			print ('tokens:', self.tokens, file = sys.stderr)

		if self.tok == '$end':
			raise ParseError ('no input', '', self.tok.pos)

		ast = self.expression ()

		if self.tok != '$end':
			self.error ()

		if os.environ.get ('CXPAD_DEBUG'):
			print ('parse:', ast, file = sys.stderr)

		return ast

_PARSER = Parser ()

def parse (text):
	return _PARSER.parse (text)
