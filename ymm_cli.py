#!/usr/bin/env python3

import argparse
import yaml
from ymmlib.core import utils
from ymmlib.core.project import ScriptProject

#============================================

def parse_args():
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(description="YMM4 script layer compiler")
	parser.add_argument('-i', '--input', dest='script_file', required=True,
		help='yaml script file or tab separated script text')
	parser.add_argument('-o', '--output', dest='output_file',
		help='output file (.xlsx or tab separated text), overrides yaml')
	parser.add_argument('-p', '--dump-rows', dest='dump_rows', action='store_true',
		help='print compiled rows as yaml and exit')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='suppress status messages')
	parser.set_defaults(quiet=False)
	args = parser.parse_args()
	return args

#============================================

def main():
	args = parse_args()
	utils.set_quiet_mode(args.quiet)
	project = ScriptProject(args.script_file, output_override=args.output_file)
	if args.dump_rows:
		resolved_rows = project.compile()
		plan = [row.to_dict() for row in resolved_rows]
		print(yaml.safe_dump(plan, sort_keys=False, allow_unicode=True))
		return
	project.run()


if __name__ == '__main__':
	main()
