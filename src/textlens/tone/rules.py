"""Compiled word tables and sentence-level rewrite rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from re import Match, Pattern
from typing import Callable, Mapping, Tuple, Union

Replacement = Union[str, Callable[[Match[str]], str]]

_APOSTROPHES = "'’"
_SENTENCE_END = ".!?"
_WORD_EDGE_BEFORE = r"(?<!\w)(?<!\w['’])"
_WORD_EDGE_AFTER = r"(?!\w)(?!['’]\w)"


def _normalize_key(value: str) -> str:
    return " ".join(value.replace("’", "'").casefold().split())


def _key_pattern(key: str) -> str:
    parts = []
    for char in key:
        if char == "'":
            parts.append(f"[{_APOSTROPHES}]")
        elif char == " ":
            parts.append(r"\s+")
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def opens_sentence(text: str, index: int) -> bool:
    """True when only whitespace separates ``index`` from a sentence end or the start."""
    pos = index - 1
    while pos >= 0 and text[pos].isspace():
        pos -= 1
    if pos < 0:
        return True
    return text[pos] in _SENTENCE_END and pos < index - 1


def capitalize_sentences(text: str) -> str:
    def _upper(match: Match[str]) -> str:
        return match.group(1) + match.group(2).upper()

    return re.sub(r"(^\s*|[.!?]\s+)([a-z])", _upper, text)


def keep_case(replacement: str) -> Callable[[Match[str]], str]:
    """Replacement callable that mirrors the capitalisation of the match."""

    def _replace(match: Match[str]) -> str:
        found = match.group(0)
        if found[:1].isupper():
            return replacement[:1].upper() + replacement[1:]
        return replacement

    return _replace


class WordTable:
    """Case-insensitive, whole-word substitution table applied in a single pass.

    Longer keys win over their prefixes ("find out" before "find"), and
    replaced text is never re-scanned, so one table cannot cascade into itself.
    """

    def __init__(self, name: str, entries: Mapping[str, str]):
        self.name = name
        self._lookup = {_normalize_key(key): value for key, value in entries.items()}
        keys = sorted(self._lookup, key=lambda key: (-len(key), key))
        alternation = "|".join(_key_pattern(key) for key in keys)
        self._pattern: Pattern[str] | None = (
            re.compile(_WORD_EDGE_BEFORE + f"(?:{alternation})" + _WORD_EDGE_AFTER, re.IGNORECASE)
            if keys
            else None
        )

    def __len__(self) -> int:
        return len(self._lookup)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _normalize_key(key) in self._lookup

    def apply(self, text: str) -> str:
        if self._pattern is None or not text:
            return text

        def _replace(match: Match[str]) -> str:
            found = match.group(0)
            # IGNORECASE matches a few letters (dotless i, dotted capital I)
            # that casefold() maps elsewhere; leave those untouched.
            replacement = self._lookup.get(_normalize_key(found))
            if replacement is None:
                return found
            if replacement and opens_sentence(text, match.start()):
                return replacement[:1].upper() + replacement[1:]
            return replacement

        return self._pattern.sub(_replace, text)

    def __repr__(self) -> str:
        return f"WordTable({self.name!r}, {len(self)} entries)"


@dataclass(frozen=True, slots=True)
class PatternRule:
    pattern: Pattern[str]
    replacement: Replacement
    count: int = 0

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text, count=self.count)


def rule(
    pattern: str, replacement: Replacement, *, count: int = 0, flags: int = re.IGNORECASE
) -> PatternRule:
    return PatternRule(re.compile(pattern, flags), replacement, count)


@dataclass(frozen=True, slots=True)
class SentenceTransform:
    """Ordered regex rules plus the effect flags layered on top of them."""

    name: str
    rules: Tuple[PatternRule, ...] = ()
    first_match_only: bool = False
    capitalize: bool = False
    add_exclamation: bool = False
    intensify: bool = False
    add_urgency: bool = False
    persuasive_opening: bool = False
    inspirational: bool = False
    effect_min_level: int = 3


_TERMINAL_PERIOD = re.compile(r"\.(\s*)$")
_INTENSIFIERS = re.compile(r"\b(very|really)\s+(?!deeply\b)([a-z]+)", re.IGNORECASE)
_TENTATIVE = re.compile(r"\b(should|could|might)\b", re.IGNORECASE)
_ABILITY = re.compile(r"\b(can|will|shall)\b", re.IGNORECASE)
PERSUASIVE_OPENER = "Consider this: "


def _apply_rules(text: str, transform: SentenceTransform) -> str:
    result = text
    for pattern_rule in transform.rules:
        updated = pattern_rule.apply(result)
        if transform.first_match_only and updated != result:
            return updated
        result = updated
    return result


def apply_sentence_transform(text: str, transform: SentenceTransform, level: int) -> str:
    result = _apply_rules(text, transform)
    if transform.capitalize:
        result = capitalize_sentences(result)
    if level < transform.effect_min_level:
        return result

    if transform.intensify:
        result = _INTENSIFIERS.sub(r"\1 deeply \2", result)
    if transform.add_urgency:
        result = _TENTATIVE.sub(keep_case("must"), result)
    if transform.add_exclamation:
        result = _TERMINAL_PERIOD.sub(r"!\1", result)
    if transform.inspirational:
        result = _ABILITY.sub(keep_case("dare to"), result)
    if transform.persuasive_opening:
        stripped = result.lstrip()
        if stripped and stripped[0].isalnum() and not stripped.startswith(PERSUASIVE_OPENER):
            result = result[: len(result) - len(stripped)] + PERSUASIVE_OPENER + stripped
    return result


def apply_word_table(text: str, table: WordTable | None) -> str:
    if table is None:
        return text
    return table.apply(text)
