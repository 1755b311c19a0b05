#!/usr/bin/env python3

"""
script_yaml_writer.py

Helpers to build ymmscript YAML text from script rows, and a small CLI
that turns a pasted spreadsheet (tab separated text) into a script file.
"""

# Standard Library
import argparse
import os
import sys

script_dir = os.path.dirname(os.path.abspath(__file__))
repo_root = os.path.dirname(script_dir)
if repo_root not in sys.path:
	sys.path.insert(0, repo_root)

# local repo modules
from ymmlib.core import paste
from ymmlib.core import utils

#============================================

def parse_args():
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(description="Convert tab separated script text to ymmscript YAML")
	parser.add_argument('-i', '--input', dest='input_file', required=True,
		help='tab separated script text, as copied from a spreadsheet')
	parser.add_argument('-o', '--output', dest='output_file', required=True,
		help='yaml script file to write')
	parser.add_argument('-x', '--export-file', dest='export_file',
		help='output.file value to store in the yaml script')
	args = parser.parse_args()
	return args

#============================================

def yaml_quote(value: str) -> str:
	"""
	Quote a string for YAML output.

	Args:
		value: Raw string.

	Returns:
		str: YAML double-quoted string.
	"""
	escaped = value.replace("\\", "\\\\").replace('"', '\\"')
	escaped = escaped.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
	parts = []
	for char in escaped:
		code = ord(char)
		if code < 0x20 or code == 0x7f:
			parts.append(f"\\x{code:02x}")
		else:
			parts.append(char)
	return "\"" + "".join(parts) + "\""

#============================================

def build_script_yaml(rows: list, output_file: str = None) -> str:
	"""
	Build a ymmscript YAML document.

	Args:
		rows: ScriptRow list.
		output_file: Optional export file for the output section.

	Returns:
		str: YAML content.
	"""
	if len(rows) == 0:
		raise RuntimeError("rows must not be empty")
	lines = []
	lines.append("ymmscript: 1")
	lines.append("")
	lines.append("rows:")
	for row in rows:
		lines.append(f"  - id: {yaml_quote(row.id)}")
		lines.append(f"    character: {yaml_quote(row.character)}")
		lines.append(f"    dialogue: {yaml_quote(row.dialogue)}")
		lines.append(f"    command: {yaml_quote(row.command)}")
	if output_file is not None:
		lines.append("")
		lines.append("output:")
		lines.append(f"  file: {yaml_quote(output_file)}")
	lines.append("")
	return "\n".join(lines)

#============================================

def main():
	args = parse_args()
	with open(args.input_file, 'r', encoding='utf-8', newline='') as handle:
		text = handle.read()
	rows = paste.parse_paste(text)
	if rows is None:
		raise RuntimeError(f"input is not tab separated: {args.input_file}")
	yaml_text = build_script_yaml(rows, args.export_file)
	with open(args.output_file, 'w', encoding='utf-8') as handle:
		handle.write(yaml_text)
	if not utils.is_quiet_mode():
		print(f"wrote {args.output_file} ({len(rows)} rows)")


if __name__ == '__main__':
	main()
