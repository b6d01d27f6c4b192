#!/usr/bin/env python3
# python 3.6+

# Command line evaluator for complex expressions.

import getopt
import os
import sys

from cxast import EvaluationError
from cxlex import ParseError
import cxeval
import cxparser
import cxplugins # registers plugin functions

_VERSION = '1.0.0'

_HELP    = f'usage: cxpad [options] expression' '''

  -h, --help           - Show help information
  -v, --version        - Show version string
  -d, --debug          - Dump tokens and parse tree to stderr
  -n, --nat            - Print parsed expression as text instead of evaluating
  -s, --strict         - Treat non-finite results as errors
  -x, --var name=value - Bind variable to value of expression, may be repeated, later values may use earlier variables
'''.lstrip ()

def _parse_var (text, vars):
	name, sep, expr = text.partition ('=')
	name            = name.strip ()

	if not sep or not name:
		raise getopt.GetoptError (f'invalid variable binding {text!r}, expected name=value')

	return name, cxeval.evaluate (cxparser.parse (expr), vars)

def main (argv = None):
	try:
		opts, args = getopt.getopt (sys.argv [1:] if argv is None else argv, 'hvdnsx:', ['help', 'version', 'debug', 'nat', 'strict', 'var='])
	except getopt.GetoptError as e:
		print (f'error: {e}', file = sys.stderr)

		return 2

	flags = {o for o, _ in opts}

	if flags & {'-h', '--help'}:
		print (_HELP)

		return 0

	if flags & {'-v', '--version'}:
		print (_VERSION)

		return 0

	if flags & {'-d', '--debug'}:
		os.environ ['CXPAD_DEBUG'] = '1'

	if not args:
		print (_HELP, file = sys.stderr)

		return 2

	cxeval.set_strict (bool (flags & {'-s', '--strict'}))

	try:
		vars = {}

		for o, a in opts:
			if o in {'-x', '--var'}:
				name, val   = _parse_var (a, vars)
				vars [name] = val

		ast = cxparser.parse (' '.join (args))

		if flags & {'-n', '--nat'}:
			print (cxeval.ast2nat (ast))
		else:
			print (cxeval.complex2nat (cxeval.evaluate (ast, vars)))

	except (ParseError, EvaluationError, getopt.GetoptError) as e:
		print (f'error: {e}', file = sys.stderr)

		return 1

	return 0

if __name__ == '__main__':
	sys.exit (main ())
