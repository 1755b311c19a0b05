#!/usr/bin/env python3

"""
Unit tests for the clipboard paste parser.
"""

# Standard Library
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from ymmlib.core import paste

#============================================

def test_is_tabular() -> None:
	"""
	Tabs or more than one line make clipboard text tabular.
	"""
	assert paste.is_tabular("a\tb")
	assert paste.is_tabular("a\nb")
	assert not paste.is_tabular("just text")
	assert not paste.is_tabular("just text\n")
	assert not paste.is_tabular("")

#============================================

def test_parse_paste_not_tabular() -> None:
	assert paste.parse_paste("ずんだもん") is None

#============================================

def test_parse_paste_single_row() -> None:
	rows = paste.parse_paste("四国めたん\tなんで呼ばれたかわかるわね？\tA連続表示\n")
	assert len(rows) == 1
	assert rows[0].character == "四国めたん"
	assert rows[0].dialogue == "なんで呼ばれたかわかるわね？"
	assert rows[0].command == "A連続表示"

#============================================

def test_parse_paste_doubled_quotes() -> None:
	"""
	A quoted cell with doubled quotes collapses to the bare text.
	"""
	rows = paste.parse_paste('ずんだもん\t"""hello, world"""\t\n')
	assert len(rows) == 1
	assert rows[0].dialogue == "hello, world"

#============================================

def test_split_records_quoted_breaks() -> None:
	text = 'A\t"line one\nline two"\tcmd\r\nB\t"tab\there"\r\n'
	records = paste.split_records(text)
	assert records == [
		["A", "line one\nline two", "cmd"],
		["B", "tab\there"],
	]

#============================================

def test_split_records_escaped_quote() -> None:
	records = paste.split_records('"say ""hi"""\tx')
	assert records == [['say "hi"', "x"]]

#============================================

def test_split_records_lone_carriage_return() -> None:
	records = paste.split_records("a\tb\rc\td")
	assert records == [["a", "b"], ["c", "d"]]

#============================================

def test_split_records_drops_blank_records() -> None:
	records = paste.split_records("\t\t\n  \t \n\nx\t\t\n")
	assert records == [["x", "", ""]]

#============================================

def test_parse_paste_missing_fields() -> None:
	rows = paste.parse_paste("ずんだもん\n四国めたん\tそう！\n")
	assert [(row.character, row.dialogue, row.command) for row in rows] == [
		("ずんだもん", "", ""),
		("四国めたん", "そう！", ""),
	]

#============================================

def test_parse_paste_trims_fields() -> None:
	rows = paste.parse_paste("  ずんだもん \t  のだ  \t B連続表示 \textra\n")
	assert (rows[0].character, rows[0].dialogue, rows[0].command) == (
		"ずんだもん", "のだ", "B連続表示")

#============================================

def test_parse_paste_fresh_ids() -> None:
	rows = paste.parse_paste("a\tb\nc\td\ne\tf\n")
	ids = [row.id for row in rows]
	assert len(set(ids)) == 3
	assert all(ids)

#============================================

def test_unquote_cell() -> None:
	assert paste.unquote_cell('"a ""b"" c"') == 'a "b" c'
	assert paste.unquote_cell('"') == '"'
	assert paste.unquote_cell('plain') == 'plain'
