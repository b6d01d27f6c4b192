# Evaluation of AST to complex values, forward mode differentiation and AST -> native text.

import cmath
from decimal import Decimal

from cxast import EvaluationError
import cxnum

_STRICT = False # non-finite results are an error

_NUMERIC_ERRORS = (ZeroDivisionError, ValueError, OverflowError)

def _num2nat (x):
	if x != x or x in {float ('inf'), float ('-inf')}:
		return str (x)

	if x.is_integer () and abs (x) < 1e16:
		return str (int (x))

	s = repr (x)

	return format (Decimal (s), 'f') if 'e' in s else s

def complex2nat (z):
	return f'{_num2nat (z.real)}{"-" if z.imag < 0 else "+"}{_num2nat (abs (z.imag))}i'

def _check (val):
	if _STRICT and not cmath.isfinite (val):
		raise EvaluationError (f'result is not finite: {complex2nat (val)}')

	return val

#...............................................................................................
class ast2val: # abstract syntax tree -> complex value
	def __new__ (cls, ast):
		self = super ().__new__ (cls)

		try:
			return _check (self._ast2val (ast))
		except _NUMERIC_ERRORS as e:
			raise EvaluationError (str (e) or e.__class__.__name__) from e

	def _ast2val (self, ast):
		func = self._ast2val_funcs.get (ast.op)

		if func is None:
			raise EvaluationError (f'cannot evaluate {ast!r}')

		return func (self, ast)

	def _ast2val_var (self, ast):
		if ast.val is None:
			raise EvaluationError (f'variable {ast.var!r} is not bound')

		return ast.val

	def _ast2val_add (self, ast):
		val = 0j

		for a, sign in ast.add:
			val = val - self._ast2val (a) if sign == '-' else val + self._ast2val (a)

		return val

	def _ast2val_mul (self, ast):
		val = 1 + 0j

		for m, mode in ast.mul:
			v   = self._ast2val (m)
			val = val * v if mode == '*' else val / v if mode == '/' else cxnum.rem (val, v)

		return val

	def _ast2val_diff (self, ast): # value of derivative function at the point bound to its variable argument
		at        = self._ast2val (ast.dvar)
		val, dval = ast2dval (ast.diff, ast.dvar.var, at)

		return ast.func (val, dval, at)

	_ast2val_funcs = {
		'#'     : lambda self, ast: complex (ast.num),
		'-imag' : lambda self, ast: complex (0, ast.imag),
		'@'     : _ast2val_var,
		'+'     : _ast2val_add,
		'*'     : _ast2val_mul,
		'^'     : lambda self, ast: cxnum.pow (self._ast2val (ast.base), self._ast2val (ast.exp)),
		'-func' : lambda self, ast: ast.func (self._ast2val (ast.arg)),
		'-func2': lambda self, ast: ast.func (self._ast2val (ast.arg1), self._ast2val (ast.arg2)),
		'-diff' : _ast2val_diff,
	}

#...............................................................................................
class ast2dval: # abstract syntax tree -> (value, derivative) with respect to variable var
	def __new__ (cls, ast, var, at = None): # at is the value of var, None uses each variable node's own bound value
		self     = super ().__new__ (cls)
		self.var = var
		self.at  = None if at is None else complex (at)

		try:
			val, dval = self._ast2dval (ast)
		except _NUMERIC_ERRORS as e:
			raise EvaluationError (str (e) or e.__class__.__name__) from e

		return _check (val), _check (dval)

	def _ast2dval (self, ast):
		if not ast.has_var (self.var): # constant with respect to var
			return ast2val (ast), 0j

		func = self._ast2dval_funcs.get (ast.op)

		if func is None:
			raise EvaluationError (f'cannot differentiate {ast!r}')

		return func (self, ast)

	def _ast2dval_var (self, ast): # only reached for the differentiation variable itself
		return (ast2val (ast) if self.at is None else self.at), 1 + 0j

	def _ast2dval_add (self, ast):
		val = dval = 0j

		for a, sign in ast.add:
			v, d = self._ast2dval (a)

			if sign == '-':
				val, dval = val - v, dval - d
			else:
				val, dval = val + v, dval + d

		return val, dval

	def _ast2dval_mul (self, ast): # product and quotient rule folded left to right
		val, dval = 1 + 0j, 0j

		for m, mode in ast.mul:
			if mode == '%':
				raise EvaluationError ('remainder is not differentiable')

			v, d = self._ast2dval (m)

			if mode == '*':
				val, dval = val * v, dval * v + val * d
			else:
				val, dval = val / v, (dval * v - val * d) / (v * v)

		return val, dval

	def _ast2dval_pow (self, ast):
		u, du = self._ast2dval (ast.base)

		if not ast.exp.has_var (self.var): # d (u^n) = n u^(n-1) u'
			n = ast2val (ast.exp)

			return cxnum.pow (u, n), n * cxnum.pow (u, n - 1) * du

		v, dv = self._ast2dval (ast.exp) # d (u^v) = u^v (v' ln u + v u' / u)
		val   = cxnum.pow (u, v)
		dval  = dv * cxnum.log (u)

		if du:
			dval += v * du / u

		return val, val * dval

	def _ast2dval_func (self, ast): # chain rule
		v, d = self._ast2dval (ast.arg)

		return ast.func (v), ast.func.partial (0) (v) * d

	def _ast2dval_func2 (self, ast):
		v1, d1 = self._ast2dval (ast.arg1)
		v2, d2 = self._ast2dval (ast.arg2)
		dval   = 0j

		if ast.arg1.has_var (self.var):
			dval += ast.func.partial (0) (v1, v2) * d1

		if ast.arg2.has_var (self.var):
			dval += ast.func.partial (1) (v1, v2) * d2

		return ast.func (v1, v2), dval

	def _ast2dval_diff (self, ast):
		raise EvaluationError (f'cannot differentiate {ast.func!s} with respect to {self.var!r} which it depends on')

	_ast2dval_funcs = {
		'@'     : _ast2dval_var,
		'+'     : _ast2dval_add,
		'*'     : _ast2dval_mul,
		'^'     : _ast2dval_pow,
		'-func' : _ast2dval_func,
		'-func2': _ast2dval_func2,
		'-diff' : _ast2dval_diff,
	}

#...............................................................................................
class ast2nat: # abstract syntax tree -> native text, parseable back into an equivalent tree
	def __new__ (cls, ast):
		self = super ().__new__ (cls)

		return self._ast2nat (ast)

	def _ast2nat (self, ast):
		return self._ast2nat_funcs [ast.op] (self, ast)

	def _ast2nat_wrap (self, ast, paren):
		s = self._ast2nat (ast)

		return f'({s})' if paren else s

	def _ast2nat_add (self, ast):
		s = []

		for i, (a, sign) in enumerate (ast.add):
			t = self._ast2nat_wrap (a, a.is_add or a.is_num_neg)

			s.append (f'-{t}' if not i and sign == '-' else t if not i else f' {sign} {t}')

		return ''.join (s)

	def _ast2nat_mul (self, ast):
		s = []

		for i, (m, mode) in enumerate (ast.mul):
			t = self._ast2nat_wrap (m, m.op in {'+', '*'} or m.is_num_neg)

			s.append (t if not i and mode == '*' else f'1{mode}{t}' if not i else f'{mode}{t}')

		return ''.join (s)

	def _ast2nat_pow (self, ast):
		base = self._ast2nat_wrap (ast.base, ast.base.op in {'+', '*', '^'} or ast.base.is_num_neg)
		exp  = self._ast2nat_wrap (ast.exp, ast.exp.op in {'+', '*'} or ast.exp.is_num_neg)

		return f'{base}^{exp}'

	_ast2nat_funcs = {
		'#'     : lambda self, ast: _num2nat (ast.num),
		'-imag' : lambda self, ast: 'i' if ast.imag == 1 else f'{_num2nat (ast.imag)}i',
		'@'     : lambda self, ast: ast.var,
		'+'     : _ast2nat_add,
		'*'     : _ast2nat_mul,
		'^'     : _ast2nat_pow,
		'-func' : lambda self, ast: f'{ast.func}({self._ast2nat (ast.arg)})',
		'-func2': lambda self, ast: f'{ast.func}({self._ast2nat (ast.arg1)}, {self._ast2nat (ast.arg2)})',
		'-diff' : lambda self, ast: f'{ast.func}({self._ast2nat (ast.diff)}, {ast.dvar.var})',
	}

#...............................................................................................
def set_strict (state):
	global _STRICT
	_STRICT = state

def evaluate (ast, vars = None): # bind {name: value, ...} then evaluate
	for var, val in (vars or {}).items ():
		ast.bind (var, val)

	return ast2val (ast)
