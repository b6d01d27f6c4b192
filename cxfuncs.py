# Function name registries for one argument, two argument and derivative functions.
#
# Each function is a Func, a str subclass whose value is the name, which also carries the numeric
# callable and a SymPy expression of the primitive from which partial derivatives are generated.

import mpmath
import sympy as sp

from cxast import EvaluationError
import cxnum

_Z, _W = _SYMS = sp.symbols ('z w')

#...............................................................................................
class Func (str):
	__slots__ = ['arity', 'func', 'sexpr', 'dfuncs']

	def __new__ (cls, name, arity, func, sexpr = None, dfuncs = None):
		self        = str.__new__ (cls, name)
		self.arity  = arity  # 1, 2 or 'd' for derivative functions
		self.func   = func
		self.sexpr  = sexpr  # SymPy expression in z (and w), None if no derivative available
		self.dfuncs = dfuncs # (d/dz, d/dw) callables, generated from sexpr on first use if not given, None entries are not differentiable

		return self

	def __call__ (self, *args):
		return self.func (*args)

	def partial (self, idx = 0): # partial derivative callable with respect to argument idx
		if self.dfuncs is None:
			if self.sexpr is None:
				raise EvaluationError (f'function {str (self)!r} has no derivative')

			syms        = _SYMS [:self.arity]
			self.dfuncs = tuple (sp.lambdify (syms, sp.diff (self.sexpr, s), modules = 'mpmath') for s in syms)

		dfunc = self.dfuncs [idx]

		if dfunc is None:
			raise EvaluationError (f'function {str (self)!r} has no derivative with respect to argument {idx + 1}')

		return lambda *args: complex (dfunc (*args))

#...............................................................................................
_FUNCS1 = (
	('sqrt'   , cxnum.sqrt   , sp.sqrt (_Z)),
	('exp'    , cxnum.exp    , sp.exp (_Z)),
	('log'    , cxnum.log    , sp.log (_Z)),
	('log10'  , cxnum.log10  , sp.log (_Z) / sp.log (10)),
	('log2'   , cxnum.log2   , sp.log (_Z) / sp.log (2)),
	('sin'    , cxnum.sin    , sp.sin (_Z)),
	('cos'    , cxnum.cos    , sp.cos (_Z)),
	('tan'    , cxnum.tan    , sp.tan (_Z)),
	('cot'    , cxnum.cot    , sp.cot (_Z)),
	('sec'    , cxnum.sec    , sp.sec (_Z)),
	('csc'    , cxnum.csc    , sp.csc (_Z)),
	('sinh'   , cxnum.sinh   , sp.sinh (_Z)),
	('cosh'   , cxnum.cosh   , sp.cosh (_Z)),
	('tanh'   , cxnum.tanh   , sp.tanh (_Z)),
	('coth'   , cxnum.coth   , sp.coth (_Z)),
	('sech'   , cxnum.sech   , sp.sech (_Z)),
	('csch'   , cxnum.csch   , sp.csch (_Z)),
	('asin'   , cxnum.asin   , sp.asin (_Z)),
	('acos'   , cxnum.acos   , sp.acos (_Z)),
	('atan'   , cxnum.atan   , sp.atan (_Z)),
	('acot'   , cxnum.acot   , sp.acot (_Z)),
	('asec'   , cxnum.asec   , sp.asec (_Z)),
	('acsc'   , cxnum.acsc   , sp.acsc (_Z)),
	('asinh'  , cxnum.asinh  , sp.asinh (_Z)),
	('acosh'  , cxnum.acosh  , sp.acosh (_Z)),
	('atanh'  , cxnum.atanh  , sp.atanh (_Z)),
	('acoth'  , cxnum.acoth  , sp.acoth (_Z)),
	('asech'  , cxnum.asech  , sp.asech (_Z)),
	('acsch'  , cxnum.acsch  , sp.acsch (_Z)),
	('rec'    , cxnum.rec    , 1 / _Z),
	('erf'    , cxnum.erf    , sp.erf (_Z)),
	('vsin'   , cxnum.vsin   , 1 - sp.cos (_Z)),
	('vcos'   , cxnum.vcos   , 1 + sp.cos (_Z)),
	('cvsin'  , cxnum.cvsin  , 1 - sp.sin (_Z)),
	('cvcos'  , cxnum.cvcos  , 1 + sp.sin (_Z)),
	('hvsin'  , cxnum.hvsin  , (1 - sp.cos (_Z)) / 2),
	('hvcos'  , cxnum.hvcos  , (1 + sp.cos (_Z)) / 2),
	('hcvsin' , cxnum.hcvsin , (1 - sp.sin (_Z)) / 2),
	('hcvcos' , cxnum.hcvcos , (1 + sp.sin (_Z)) / 2),
	('exsec'  , cxnum.exsec  , sp.sec (_Z) - 1),
	('excsc'  , cxnum.excsc  , sp.csc (_Z) - 1),
	('avsin'  , cxnum.avsin  , sp.acos (1 - _Z)),
	('avcos'  , cxnum.avcos  , sp.acos (_Z - 1)),
	('acvsin' , cxnum.acvsin , sp.asin (1 - _Z)),
	('acvcos' , cxnum.acvcos , sp.asin (_Z - 1)),
	('ahvsin' , cxnum.ahvsin , 2 * sp.asin (sp.sqrt (_Z))),
	('ahvcos' , cxnum.ahvcos , 2 * sp.acos (sp.sqrt (_Z))),
	('ahcvsin', cxnum.ahcvsin, sp.asin (1 - 2 * _Z)),
	('ahcvcos', cxnum.ahcvcos, sp.asin (2 * _Z - 1)),
	('aexsec' , cxnum.aexsec , sp.asec (_Z + 1)),
	('aexcsc' , cxnum.aexcsc , sp.acsc (_Z + 1)),
)

_FUNCS1_NODIFF = (
	('abs'  , cxnum.abs_),
	('absre', cxnum.absre),
	('absim', cxnum.absim),
	('conj' , cxnum.conj),
	('re'   , cxnum.re),
	('im'   , cxnum.im),
	('norm' , cxnum.norm),
	('arg'  , cxnum.arg),
	('flip' , cxnum.flip),
	('gi'   , cxnum.gi),
	('round', cxnum.round_),
	('ceil' , cxnum.ceil),
	('floor', cxnum.floor),
	('trunc', cxnum.trunc),
)

_FUNCS2 = (
	('inflect', cxnum.inflect, _W + (_Z - _W) ** 2),
)

_FUNCS2_NODIFF = ('foldu', 'foldd', 'foldl', 'foldr', 'foldi', 'foldo', 'shear', 'cmp')

_FUNCSD = (
	('der'   , lambda val, dval, at: dval),
	('newton', lambda val, dval, at: at - val / dval), # one Newton-Raphson step from the bound point
	('dlog'  , lambda val, dval, at: dval / val),      # logarithmic derivative
)

FUNCS1 = dict ((name, Func (name, 1, func, sexpr)) for name, func, sexpr in _FUNCS1)
FUNCS1.update ((name, Func (name, 1, func)) for name, func in _FUNCS1_NODIFF)
FUNCS1 ['ln']    = FUNCS1 ['log']
FUNCS1 ['gamma'] = Func ('gamma', 1, cxnum.gamma, dfuncs = (lambda z: mpmath.gamma (z) * mpmath.digamma (z),))
FUNCS1 ['fact']  = Func ('fact', 1, cxnum.fact, dfuncs = (lambda z: mpmath.gamma (z + 1) * mpmath.digamma (z + 1),))
FUNCS1 ['rzeta'] = Func ('rzeta', 1, cxnum.rzeta, dfuncs = (lambda z: mpmath.zeta (z, 1, 1),))

FUNCS2 = dict ((name, Func (name, 2, func, sexpr)) for name, func, sexpr in _FUNCS2)
FUNCS2.update ((name, Func (name, 2, getattr (cxnum, name))) for name in _FUNCS2_NODIFF)
FUNCS2 ['bipol']  = Func ('bipol', 2, cxnum.bipol, dfuncs = (lambda z, a: -0.5j * a.real * cxnum.csc (z / 2) ** 2, None)) # second argument used through its real part only
FUNCS2 ['ibipol'] = Func ('ibipol', 2, cxnum.ibipol, dfuncs = (lambda z, a: -2 / (1j * a.real * (1 + (z / (1j * a.real)) ** 2)), None))

FUNCSD = dict ((name, Func (name, 'd', func)) for name, func in _FUNCSD)

#...............................................................................................
def _check_free (name):
	if name in FUNCS1 or name in FUNCS2 or name in FUNCSD:
		raise ValueError (f'function {name!r} already registered')

def register_func1 (name, func, sexpr = None, dfunc = None):
	_check_free (name)

	FUNCS1 [name] = f = Func (name, 1, func, sexpr, None if dfunc is None else (dfunc,))

	return f

def register_func2 (name, func, sexpr = None, dfuncs = None):
	_check_free (name)

	FUNCS2 [name] = f = Func (name, 2, func, sexpr, dfuncs)

	return f

def lookup (name): # -> ('FUNC1' | 'FUNC2' | 'FUNCD', Func) or None
	for kind, funcs in (('FUNC1', FUNCS1), ('FUNC2', FUNCS2), ('FUNCD', FUNCSD)):
		func = funcs.get (name)

		if func is not None:
			return kind, func

	return None
