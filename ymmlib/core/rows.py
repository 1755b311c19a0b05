#!/usr/bin/env python3

"""
Shared row shapes for script input, scene state, and compiled output.
"""

from ymmlib.core import utils

#============================================

class Position():
	LEFT = '左'
	CENTER = '中央'
	RIGHT = '右'
	NONE = 'なし'

#============================================

class ScriptRow():
	"""
	One authored script line: speaker, dialogue, and staging command.
	"""
	def __init__(self, character: str = "", dialogue: str = "",
		command: str = "", row_id: str = None):
		self.id = row_id if row_id is not None else utils.make_row_id()
		self.character = utils.as_text(character)
		self.dialogue = utils.as_text(dialogue)
		self.command = utils.as_text(command)

	#============================
	def to_dict(self) -> dict:
		return {
			'id': self.id,
			'character': self.character,
			'dialogue': self.dialogue,
			'command': self.command,
		}

	#============================
	def __repr__(self) -> str:
		return (f"ScriptRow(id={self.id!r}, character={self.character!r}, "
			f"dialogue={self.dialogue!r}, command={self.command!r})")

#============================================

class SceneConfig():
	def __init__(self, left: str = "", center: str = "", right: str = ""):
		self.left = left
		self.center = center
		self.right = right

	#============================
	def reset(self) -> None:
		self.left = ""
		self.center = ""
		self.right = ""

	#============================
	def to_dict(self) -> dict:
		return {
			'left': self.left,
			'center': self.center,
			'right': self.right,
		}

#============================================

class ResolvedRow():
	"""
	Compiled output row; original_index points back at the source ScriptRow.
	"""
	def __init__(self, original_index: int, layer_name: str, dialogue: str,
		command: str):
		self.original_index = original_index
		self.layer_name = layer_name
		self.dialogue = dialogue
		self.command = command

	#============================
	def as_tuple(self) -> tuple:
		return (self.layer_name, self.dialogue, self.command)

	#============================
	def to_dict(self) -> dict:
		return {
			'original_index': self.original_index,
			'layer_name': self.layer_name,
			'dialogue': self.dialogue,
			'command': self.command,
		}

	#============================
	def __repr__(self) -> str:
		return (f"ResolvedRow({self.original_index}, {self.layer_name!r}, "
			f"{self.dialogue!r}, {self.command!r})")
