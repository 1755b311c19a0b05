#!/usr/bin/env python3

"""
Compile script rows into YMM4 layer rows.

Each spoken line gets a layer name built from the speaker, the screen slot
the speaker holds in the current scene, and a display tier that cycles
1, 2, 3 so up to three lines of one speaker can stay on screen together.
"""

import re
from ymmlib.core.rows import Position
from ymmlib.core.rows import ResolvedRow
from ymmlib.core.rows import SceneConfig

#============================================

SCENE_RESET_TOKENS = ('場面切り替え', '画面表示')
CLEAR_CHARACTER_TOKENS = ('全部消して', 'ナレーション')
CLEAR_COMMAND_TOKENS = ('全部消して', '画面上のセリフを全て消して')
NARRATION_TOKEN = 'ナレーション'
TRACK_TOKEN = '連続表示'

TRACK_PATTERN = re.compile(r'([A-Z])' + TRACK_TOKEN)
SCENE_SPLIT_PATTERN = re.compile(r'[,，、\s　]+')
SCENE_PAIR_PATTERN = re.compile(r'(.+?)[：:；;](.+)')

MAX_TIER = 3

# row kinds, in precedence order
KIND_SCENE_RESET = 'scene_reset'
KIND_NARRATION = 'narration'
KIND_EMPTY = 'empty'
KIND_NORMAL = 'normal'

#============================================

class CompilerState():
	def __init__(self):
		self.scene = SceneConfig()
		self.tiers = {}
		self.tracks = {}

#============================================

def is_scene_reset(character: str) -> bool:
	return any(token in character for token in SCENE_RESET_TOKENS)

#============================================

def is_clear_trigger(character: str, command: str) -> bool:
	if is_scene_reset(character):
		return True
	if any(token in character for token in CLEAR_CHARACTER_TOKENS):
		return True
	return any(token in command for token in CLEAR_COMMAND_TOKENS)

#============================================

def is_narration(character: str) -> bool:
	return NARRATION_TOKEN in character

#============================================

def parse_scene_config(payload: str, scene: SceneConfig = None) -> SceneConfig:
	"""
	Parse a position payload such as 'ずんだもん；右、四国めたん；左'.

	Args:
		payload: Comma, space, or newline separated name/position pairs.
		scene: Scene to fill in; a new empty scene when None.

	Returns:
		SceneConfig: The filled scene.
	"""
	if scene is None:
		scene = SceneConfig()
	if not payload:
		return scene
	for pair in SCENE_SPLIT_PATTERN.split(payload):
		if not pair:
			continue
		match = SCENE_PAIR_PATTERN.search(pair)
		if match is None:
			continue
		name = match.group(1).strip()
		position = match.group(2).strip()
		if Position.RIGHT in position:
			scene.right = name
		elif Position.LEFT in position:
			scene.left = name
		elif '中' in position:
			scene.center = name
	return scene

#============================================

def find_track_symbol(command: str):
	match = TRACK_PATTERN.search(command)
	if match is None:
		return None
	return match.group(1)

#============================================

def position_label(scene: SceneConfig, name: str) -> str:
	if not name:
		return Position.CENTER
	if scene.left == name:
		return Position.LEFT
	if scene.right == name:
		return Position.RIGHT
	if scene.center == name:
		return Position.CENTER
	return Position.CENTER

#============================================

def next_tier(tier: int) -> int:
	if tier < MAX_TIER:
		return tier + 1
	return 1

#============================================

def classify_row(state: CompilerState, character: str, dialogue: str) -> str:
	"""
	Pick the row kind; checks run in precedence order.
	"""
	if is_scene_reset(character) and not dialogue:
		return KIND_SCENE_RESET
	if is_narration(character):
		return KIND_NARRATION
	name = state.tracks.get(character, character)
	if not name and not dialogue:
		return KIND_EMPTY
	return KIND_NORMAL

#============================================

def compile_row(state: CompilerState, index: int, row) -> ResolvedRow:
	"""
	Compile one script row, updating the run state in place.

	Args:
		state: Scene, tier, and track state for the current run.
		index: Position of the row in the script.
		row: ScriptRow to compile.

	Returns:
		ResolvedRow: The compiled row.
	"""
	character = (row.character or "").strip()
	dialogue = (row.dialogue or "").strip()
	command = (row.command or "").strip()
	scene_reset = is_scene_reset(character)

	if is_clear_trigger(character, command):
		state.tiers.clear()
	if scene_reset:
		state.scene.reset()
		parse_scene_config(command or dialogue, state.scene)

	kind = classify_row(state, character, dialogue)
	if kind == KIND_SCENE_RESET:
		return ResolvedRow(index, character, "", command)
	if kind == KIND_NARRATION:
		return ResolvedRow(index, character, dialogue, command)

	symbol = find_track_symbol(command)
	if symbol is not None and character and not scene_reset:
		if TRACK_TOKEN not in character:
			state.tracks[symbol] = character

	if kind == KIND_EMPTY:
		return ResolvedRow(index, "", "", command)

	name = state.tracks.get(character, character)
	if not name:
		return ResolvedRow(index, "", dialogue, command)
	tier = state.tiers.get(name, 1)
	layer_name = f"{name}{position_label(state.scene, name)}{tier}"
	state.tiers[name] = next_tier(tier)
	return ResolvedRow(index, layer_name, dialogue, command)

#============================================

def compile_rows(rows: list) -> list:
	"""
	Compile an ordered list of ScriptRow into ResolvedRow, one per input.
	"""
	state = CompilerState()
	results = []
	for index, row in enumerate(rows):
		results.append(compile_row(state, index, row))
	return results
