#!/usr/bin/env python3

import os
import time
import uuid

#============================================

_QUIET_MODE = False

#============================================

def set_quiet_mode(quiet: bool) -> None:
	global _QUIET_MODE
	_QUIET_MODE = bool(quiet)
	return

#============================================

def is_quiet_mode() -> bool:
	return _QUIET_MODE

#============================================

def make_row_id() -> str:
	"""
	Make a short unique id for a script row.
	"""
	return uuid.uuid4().hex[:9]

#============================================

def as_text(value) -> str:
	if value is None:
		return ""
	if isinstance(value, str):
		return value
	return str(value)

#============================================

def ensure_file_exists(filepath: str) -> None:
	if not os.path.exists(filepath):
		raise RuntimeError(f"file not found: {filepath}")
	return

#============================================

def make_timestamp() -> str:
	"""
	Date and minute stamp used in default export file names.
	"""
	now = time.localtime()
	datestamp = time.strftime("%Y%m%d", now)
	timestamp = time.strftime("%H%M", now)
	return f"{datestamp}_{timestamp}"
