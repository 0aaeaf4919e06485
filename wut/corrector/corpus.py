# wut/corrector/corpus.py
"""
Read-only vocabularies for the corrector.

A ``Corpus`` is an ordered, de-duplicated collection of valid strings with
O(1) membership. The ``CorpusStore`` groups every corpus the pipeline needs
and hands them out by pure lookup keyed on the lowercased root command.
"""
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from wut.corrector import data
from wut.corrector.errors import CorpusError
from wut.corrector.models import ShortFlagInfo


class Corpus:
    """Named, ordered, immutable vocabulary."""

    __slots__ = ("name", "_entries", "_members")

    def __init__(self, name: str, entries: Iterable[str]):
        if entries is None:
            raise CorpusError(f"Corpus '{name}' was given no entries")

        ordered = []
        seen = set()
        for entry in entries:
            if not isinstance(entry, str) or not entry:
                raise CorpusError(f"Corpus '{name}' contains an empty or non-string entry: {entry!r}")
            if entry not in seen:
                seen.add(entry)
                ordered.append(entry)

        self.name = name
        self._entries: Tuple[str, ...] = tuple(ordered)
        self._members = frozenset(ordered)

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"Corpus({self.name!r}, {len(self._entries)} entries)"

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries


EMPTY_CORPUS = Corpus("empty", ())


class CorpusStore:
    """
    Every vocabulary the corrector consults.

    Built once from plain tables and never mutated afterwards, so a single
    store can be shared by concurrent analyses without locking.
    """

    def __init__(
        self,
        root_commands: Iterable[str],
        subcommands: Mapping[str, Iterable[str]],
        long_flags: Mapping[str, Iterable[str]],
        short_flags: Mapping[str, Mapping[str, Tuple[str, str]]],
        global_words: Iterable[str],
        dangerous_commands: Iterable[str],
        modern_alternatives: Mapping[str, Iterable[str]],
        root_typos: Optional[Mapping[str, str]] = None,
        command_typos: Optional[Mapping[str, str]] = None,
        prefixable_tools: Iterable[str] = (),
    ):
        self._roots = Corpus("roots", root_commands)
        self._subcommands: Dict[str, Corpus] = {
            root.lower(): Corpus(f"{root} subcommands", words)
            for root, words in subcommands.items()
        }
        self._long_flags: Dict[str, Corpus] = {
            root.lower(): Corpus(f"{root} flags", flags)
            for root, flags in long_flags.items()
        }
        self._short_flags: Dict[str, Dict[str, ShortFlagInfo]] = {
            root.lower(): {char: ShortFlagInfo(*info) for char, info in table.items()}
            for root, table in short_flags.items()
        }

        self._global = Corpus("global", global_words)

        self._dangerous: Tuple[str, ...] = tuple(dangerous_commands)
        self._alternatives: Dict[str, Tuple[str, ...]] = {
            root.lower(): tuple(alts) for root, alts in modern_alternatives.items()
        }
        self._root_typos: Dict[str, str] = dict(root_typos or {})
        self._command_typos: Dict[str, str] = dict(command_typos or {})
        self._prefixable: Tuple[str, ...] = tuple(prefixable_tools)

    @classmethod
    def default(cls) -> "CorpusStore":
        """Store populated from the built-in tables."""
        return cls(
            root_commands=data.ROOT_COMMANDS,
            subcommands=data.SUBCOMMANDS,
            long_flags=data.LONG_FLAGS,
            short_flags=data.SHORT_FLAGS,
            global_words=data.GLOBAL_WORDS,
            dangerous_commands=data.DANGEROUS_COMMANDS,
            modern_alternatives=data.MODERN_ALTERNATIVES,
            root_typos=data.ROOT_TYPOS,
            command_typos=data.COMMAND_TYPOS,
            prefixable_tools=data.PREFIXABLE_TOOLS,
        )

    def roots(self) -> Corpus:
        return self._roots

    def subcommands(self, root: str) -> Corpus:
        """Subcommands of ``root``; empty when none are registered."""
        return self._subcommands.get(root.lower(), EMPTY_CORPUS)

    def long_flags(self, root: str) -> Corpus:
        """Long flag names (without dashes) accepted by ``root``."""
        return self._long_flags.get(root.lower(), EMPTY_CORPUS)

    def short_flags(self, root: str) -> Optional[Dict[str, ShortFlagInfo]]:
        """Case-sensitive short-flag table for ``root``, or None."""
        return self._short_flags.get(root.lower())

    def global_words(self) -> Corpus:
        return self._global

    def dangerous_commands(self) -> Tuple[str, ...]:
        return self._dangerous

    def alternatives(self, root: str) -> Tuple[str, ...]:
        return self._alternatives.get(root.lower(), ())

    def root_typo(self, token: str) -> Optional[str]:
        return self._root_typos.get(token.lower())

    def command_typo(self, command: str) -> Optional[str]:
        return self._command_typos.get(" ".join(command.lower().split()))

    def typo_table(self) -> Dict[str, str]:
        """Every known typo, whole commands first."""
        return {**self._command_typos, **self._root_typos}

    def parent_tool_for(self, word: str) -> Optional[str]:
        """First prefixable tool that lists ``word`` as a subcommand."""
        word = word.lower()
        for tool in self._prefixable:
            if word in self.subcommands(tool):
                return tool
        return None


_default_store: Optional[CorpusStore] = None


def get_default_store() -> CorpusStore:
    """Process-wide store built from the bundled tables."""
    global _default_store
    if _default_store is None:
        _default_store = CorpusStore.default()
    return _default_store
