#!/usr/bin/env python3

import os
import yaml
from ymmlib.core import paste
from ymmlib.core import utils
from ymmlib.core.rows import ScriptRow

#============================================

YAML_EXTENSIONS = ('.yaml', '.yml')
MAX_FILE_SIZE = 10 ** 7

#============================================

class ScriptData():
	def __init__(self):
		self.script_file = None
		self.output_override = None
		self.data = {}
		self.rows = []
		self.output = {}

#============================================

class ScriptLoader():
	def __init__(self, script_file: str, output_override: str = None):
		self.script_file = script_file
		self.output_override = output_override

	#============================
	def load(self) -> ScriptData:
		utils.ensure_file_exists(self.script_file)
		file_size = os.path.getsize(self.script_file)
		if file_size > MAX_FILE_SIZE:
			raise RuntimeError("script file is larger than 10MB")
		script = ScriptData()
		script.script_file = self.script_file
		script.output_override = self.output_override
		_, ext = os.path.splitext(self.script_file)
		if ext.lower() in YAML_EXTENSIONS:
			script.data = self._load_yaml()
			self._validate_required_keys(script.data)
			script.rows = self._parse_rows(script.data.get('rows'))
			script.output = self._parse_output(script.data.get('output'))
		else:
			script.rows = self._load_tabular()
			script.output = self._parse_output(None)
		return script

	#============================
	def _load_yaml(self) -> dict:
		with open(self.script_file, 'r', encoding='utf-8') as data_file:
			data = yaml.safe_load(data_file)
		if not isinstance(data, dict):
			raise RuntimeError("script yaml must be a mapping at the top level")
		return data

	#============================
	def _validate_required_keys(self, data: dict) -> None:
		if data.get('ymmscript') != 1:
			raise RuntimeError("ymmscript must be set to 1")
		if 'rows' not in data:
			raise RuntimeError("missing required key: rows")

	#============================
	def _parse_rows(self, raw_rows) -> list:
		if not isinstance(raw_rows, list) or len(raw_rows) == 0:
			raise RuntimeError("rows must be a non-empty list")
		rows = []
		for index, entry in enumerate(raw_rows, start=1):
			if not isinstance(entry, dict):
				raise RuntimeError(f"rows[{index}] must be a mapping")
			if entry.get('enabled', True) is False:
				continue
			row_id = entry.get('id')
			if row_id is not None:
				row_id = str(row_id)
			row = ScriptRow(
				character=entry.get('character'),
				dialogue=entry.get('dialogue'),
				command=entry.get('command'),
				row_id=row_id,
			)
			rows.append(row)
		return rows

	#============================
	def _load_tabular(self) -> list:
		with open(self.script_file, 'r', encoding='utf-8-sig', newline='') as text_file:
			text = text_file.read()
		rows = paste.parse_paste(text)
		if rows is None:
			raise RuntimeError(f"script file is not tab separated: {self.script_file}")
		return rows

	#============================
	def _parse_output(self, output) -> dict:
		if output is None:
			output = {}
		if not isinstance(output, dict):
			raise RuntimeError("output must be a mapping")
		output_file = self.output_override
		if output_file is None:
			output_file = output.get('file')
		return {
			'file': output_file,
		}
