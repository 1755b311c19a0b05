#!/usr/bin/env python3

"""
Parse spreadsheet clipboard text (tab separated, double-quote aware)
into script rows.
"""

from ymmlib.core.rows import ScriptRow

#============================================

def is_tabular(text: str) -> bool:
	if not text:
		return False
	if '\t' in text:
		return True
	return len(text.strip().split('\n')) > 1

#============================================

def split_records(text: str) -> list:
	"""
	Split clipboard text into records of field strings.

	Quoted fields may hold tabs and line breaks; a doubled quote inside
	quotes is a literal quote. Blank records are dropped.

	Args:
		text: Raw clipboard text.

	Returns:
		list: Records, each a list of field strings.
	"""
	records = []
	record = []
	field = []
	in_quotes = False
	index = 0
	length = len(text)
	while index < length:
		char = text[index]
		if char == '"':
			if in_quotes and index + 1 < length and text[index + 1] == '"':
				field.append('"')
				index += 1
			else:
				in_quotes = not in_quotes
		elif char == '\t' and not in_quotes:
			record.append("".join(field))
			field = []
		elif char in ('\n', '\r') and not in_quotes:
			if char == '\r' and index + 1 < length and text[index + 1] == '\n':
				index += 1
			record.append("".join(field))
			records.append(record)
			record = []
			field = []
		else:
			field.append(char)
		index += 1
	if len(field) > 0 or len(record) > 0:
		record.append("".join(field))
		records.append(record)
	return [fields for fields in records if "".join(fields).strip() != ""]

#============================================

def unquote_cell(value: str) -> str:
	if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
		return value[1:-1].replace('""', '"')
	return value

#============================================

def _field(fields: list, index: int) -> str:
	if index < len(fields):
		return fields[index].strip()
	return ""

#============================================

def records_to_rows(records: list) -> list:
	rows = []
	for fields in records:
		row = ScriptRow(
			character=_field(fields, 0),
			dialogue=unquote_cell(_field(fields, 1)),
			command=_field(fields, 2),
		)
		rows.append(row)
	return rows

#============================================

def parse_paste(text: str):
	"""
	Convert clipboard text into script rows.

	Returns None when the text is not tabular, so the caller can treat it
	as a plain single-cell edit.
	"""
	if not is_tabular(text):
		return None
	return records_to_rows(split_records(text))
