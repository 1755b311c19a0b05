#!/usr/bin/env python3

import os

#============================================

def format_clipboard_text(resolved_rows: list) -> str:
	"""
	Tab-separated layer name, dialogue, command; one line per row.
	"""
	lines = []
	for row in resolved_rows:
		lines.append(f"{row.layer_name}\t{row.dialogue}\t{row.command}")
	return "\n".join(lines)

#============================================

class TsvExporter():
	def __init__(self, resolved_rows: list, output_file: str):
		self.resolved_rows = resolved_rows
		self.output_file = output_file

	#============================
	def export(self) -> None:
		if len(self.resolved_rows) == 0:
			raise RuntimeError("no resolved rows to export")
		text = format_clipboard_text(self.resolved_rows)
		os.makedirs(os.path.dirname(self.output_file) or '.', exist_ok=True)
		with open(self.output_file, 'w', encoding='utf-8') as handle:
			handle.write(text)
			handle.write("\n")
