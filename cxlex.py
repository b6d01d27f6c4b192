# Token type and regex table driven lexer base for the expression parser.

import re

#...............................................................................................
class ParseError (SyntaxError):
	def __init__ (self, msg, text = None, pos = None):
		super ().__init__ (msg if pos is None else f'{msg} at position {pos}')

		self.text = text
		self.pos  = pos

class LexError (ParseError):
	pass

class Token (str):
	__slots__ = ['text', 'pos', 'grp']

	def __new__ (cls, str_, text = None, pos = None, grps = None):
		self      = str.__new__ (cls, str_)
		self.text = text or ''
		self.pos  = pos
		self.grp  = () if not grps else grps

		return self

	def __repr__ (self):
		return f'{str.__repr__ (self)}:{self.text!r}@{self.pos}'

#...............................................................................................
class Lexer:
	TOKENS = {} # {'TOKEN': 'regex', ...} - order matters, first match wins

	def __init__ (self):
		self.set_tokens (self.TOKENS)

	def set_tokens (self, tokens):
		self.tokgrps = {} # {'token': (groups pos start, groups pos end), ...}
		tokpats      = list (tokens.items ())
		pos          = 0

		for tok, pat in tokpats:
			l                   = re.compile (pat).groups + 1
			self.tokgrps [tok]  = (pos, pos + l)
			pos                += l

		self.tokre   = '|'.join (f'(?P<{tok}>{pat})' for tok, pat in tokpats)
		self.tokrec  = re.compile (self.tokre)

	def tokenize (self, text):
		tokens = []
		end    = len (text)
		pos    = 0

		while pos < end:
			m = self.tokrec.match (text, pos)

			if m is None or not m.group (0):
				raise LexError (f'unexpected character {text [pos]!r}', text [pos], pos)

			if m.lastgroup != 'ignore':
				tok  = m.lastgroup
				s, e = self.tokgrps [tok]
				grps = m.groups () [s : e]

				tokens.append (Token (tok, grps [0], pos, grps [1:]))

			pos += len (m.group (0))

		tokens.append (Token ('$end', '', pos))

		return tokens
