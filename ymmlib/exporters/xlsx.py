import os
import openpyxl
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from ymmlib.core import utils

#============================================

SHEET_TITLE = "YMM4_Script"
HEADERS = ('レイヤー名', 'セリフ', '指示')

#============================================

def clean_cell(value: str) -> str:
	"""
	Drop control characters that worksheets cannot store.
	"""
	return ILLEGAL_CHARACTERS_RE.sub("", value)

#============================================
class XlsxExporter():
	def __init__(self, resolved_rows: list, output_file: str = None):
		self.resolved_rows = resolved_rows
		self.output_file = output_file or self._default_output_path()
		self.workbook = None

	#============================
	def _default_output_path(self) -> str:
		return f"{SHEET_TITLE}_{utils.make_timestamp()}.xlsx"

	#============================
	def export(self) -> None:
		if len(self.resolved_rows) == 0:
			raise RuntimeError("no resolved rows to export")
		self.workbook = openpyxl.Workbook()
		sheet = self.workbook.active
		sheet.title = SHEET_TITLE
		sheet.append(list(HEADERS))
		for row in self.resolved_rows:
			sheet.append([clean_cell(value) for value in row.as_tuple()])
		self._write_output()

	#============================
	def _write_output(self) -> None:
		os.makedirs(os.path.dirname(self.output_file) or '.', exist_ok=True)
		self.workbook.save(self.output_file)
