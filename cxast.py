# Abstract syntax tree for complex expressions, tuple based.
#
# ('#', num)                                  - real constant, num is a float
# ('-imag', imag)                             - imaginary constant imag * i, imag is a float
# ('@', 'var')                                - variable, instance carries a mutable bound value slot 'val'
# ('+', ((expr1, '+'), (expr2, '-'), ...))    - addition chain, each term carries its sign
# ('*', ((expr1, '*'), (expr2, '/'), ...))    - multiplication chain, each term carries its mode '*', '/' or '%'
# ('^', base, exp)                            - power base ^ exp(onent), right associative
# ('-func', func, arg)                        - one argument function call, func is a resolved cxfuncs.Func
# ('-func2', func, arg1, arg2)                - two argument function call
# ('-diff', func, expr, ('@', 'var'))         - derivative function of expr with respect to variable var

import math

#...............................................................................................
class EvaluationError (Exception):
	pass

class AST (tuple):
	op      = None

	CONSTS  = {}

	_OP2CLS = {}
	_CLS2OP = {}

	def __new__ (cls, *args, **kw):
		op       = AST._CLS2OP.get (cls)
		cls_args = tuple (AST (*arg) if arg.__class__ is tuple else arg for arg in args)

		if op:
			args = (op,) + cls_args

		elif args:
			args = cls_args

			try:
				cls2 = AST._OP2CLS.get (args [0])
			except TypeError: # for unhashable types
				cls2 = None

			if cls2:
				cls      = cls2
				cls_args = cls_args [1:]

		self = tuple.__new__ (cls, args)

		if self.op:
			self._init (*cls_args)

		if kw:
			self.__dict__.update (kw)

		return self

	def __getattr__ (self, name): # calculate value for nonexistent self.name by calling self._name () and store
		func                 = getattr (self, f'_{name}') if name [0] != '_' else None
		val                  = func and func ()
		self.__dict__ [name] = val

		return val

	_kids = lambda self: ()

	def accept (self, visitor): # pre-order, node first then children left to right, iterative so depth is not limited by the stack
		stack = [self]

		while stack:
			ast = stack.pop ()

			visitor (ast)
			stack.extend (reversed (ast.kids))

	def bind (self, var, val):
		self.accept (BindVar (var, val))

		return self # convenience

	def has_var (self, var):
		return var in self.free_vars

	def _free_vars (self):
		vars = set ()

		self.accept (lambda ast: ast.is_var and vars.add (ast.var))

		return vars

	@staticmethod
	def register_AST (cls):
		AST._CLS2OP [cls]    = cls.op
		AST._OP2CLS [cls.op] = cls

		setattr (AST, cls.__name__ [4:], cls)

#...............................................................................................
class AST_Num (AST):
	op, is_num = '#', True

	def _init (self, num):
		self.num = num

	_is_num_neg = lambda self: self.num < 0

class AST_Imag (AST):
	op, is_imag = '-imag', True

	def _init (self, imag):
		self.imag = imag

class AST_Var (AST):
	op, is_var = '@', True

	def _init (self, var):
		self.var = var
		self.val = None # bound value, owned by this node instance only

class AST_Add (AST):
	op, is_add = '+', True

	def _init (self, add):
		self.add = add

	_kids = lambda self: tuple (a for a, _ in self.add)

class AST_Mul (AST):
	op, is_mul = '*', True

	def _init (self, mul):
		self.mul = mul

	_kids = lambda self: tuple (m for m, _ in self.mul)

class AST_Pow (AST):
	op, is_pow = '^', True

	def _init (self, base, exp):
		self.base, self.exp = base, exp

	_kids = lambda self: (self.base, self.exp)

class AST_Func (AST):
	op, is_func = '-func', True

	def _init (self, func, arg):
		self.func, self.arg = func, arg

	_kids = lambda self: (self.arg,)

class AST_Func2 (AST):
	op, is_func2 = '-func2', True

	def _init (self, func, arg1, arg2):
		self.func, self.arg1, self.arg2 = func, arg1, arg2

	_kids = lambda self: (self.arg1, self.arg2)

class AST_Diff (AST):
	op, is_diff = '-diff', True

	def _init (self, func, diff, dvar):
		self.func, self.diff, self.dvar = func, diff, dvar

	_kids = lambda self: (self.diff, self.dvar)

#...............................................................................................
class BindVar: # visitor which assigns a value to every variable node of a given name, case sensitive
	def __init__ (self, var, val):
		self.var = var
		self.val = None if val is None else complex (val) # None unbinds

	def __call__ (self, ast):
		if ast.is_var and ast.var == self.var:
			ast.val = self.val

#...............................................................................................
_AST_CLASSES = [AST_Num, AST_Imag, AST_Var, AST_Add, AST_Mul, AST_Pow, AST_Func, AST_Func2, AST_Diff]

for _cls in _AST_CLASSES:
	AST.register_AST (_cls)

_AST_CONSTS = (('pi', math.pi), ('e', math.e), ('phi', (1 + math.sqrt (5)) / 2))

for _var, _num in _AST_CONSTS:
	AST.CONSTS [_var] = AST ('#', _num)
