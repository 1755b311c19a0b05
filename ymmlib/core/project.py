#!/usr/bin/env python3

import os
from ymmlib.core import compiler
from ymmlib.core import utils
from ymmlib.core.loader import ScriptLoader
from ymmlib.exporters.tsv import TsvExporter
from ymmlib.exporters.tsv import format_clipboard_text
from ymmlib.exporters.xlsx import XlsxExporter

#============================================

class ScriptProject():
	def __init__(self, script_file: str, output_override: str = None):
		loader = ScriptLoader(script_file, output_override=output_override)
		self._script = loader.load()
		self.script_file = self._script.script_file
		self.rows = self._script.rows
		self.output = self._script.output
		self.resolved_rows = []

	#============================
	def compile(self) -> list:
		self.resolved_rows = compiler.compile_rows(self.rows)
		return self.resolved_rows

	#============================
	def export(self) -> str:
		"""
		Write the compiled rows; prints clipboard text when no output file is set.

		Returns:
			str: Output file path, or None when printed to stdout.
		"""
		if len(self.resolved_rows) == 0:
			raise RuntimeError("no resolved rows to export")
		output_file = self.output.get('file')
		if output_file is None:
			print(format_clipboard_text(self.resolved_rows))
			return None
		_, ext = os.path.splitext(output_file)
		if ext.lower() == '.xlsx':
			exporter = XlsxExporter(self.resolved_rows, output_file)
		else:
			exporter = TsvExporter(self.resolved_rows, output_file)
		exporter.export()
		if not utils.is_quiet_mode():
			print(f"wrote {output_file}")
		return output_file

	#============================
	def run(self) -> str:
		self.compile()
		return self.export()
