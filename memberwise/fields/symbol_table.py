import threading
from enum import Enum
from typing import Any, Iterable

from bidict import bidict, frozenbidict, DuplicationError

from ..utilities.errors import RegistrationError, SymbolNotFoundError
from ..utilities.logger import get_logger


class SymbolTable:
    """ Bidirectional mapping between symbol names and the values of one enum type.
    Filled in while the owner type's members are registered, read-only afterwards. """

    def __init__(self, enum_type: type[Enum]) -> None:
        self.enum_type = enum_type
        self._symbols: bidict[str, Enum] = bidict()

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({self.enum_type.__name__}, {dict(self._symbols)})"

    def register(self, name: str, value: Enum) -> None:
        """ Register a name for a value. Each value has exactly one name and each name exactly one value. Registering the same pair twice is a no-op. """
        self.register_all([(name, value)])

    def register_all(self, symbols: Iterable[tuple[str, Enum]]) -> None:
        """ Register several (name, value) pairs at once. If any pair is rejected, the table is left unchanged. """
        staged = self._symbols.copy()
        for name, value in symbols:
            self._put(staged, name, value)
        self._symbols = staged

    def _put(self, symbols: bidict[str, Enum], name: str, value: Enum) -> None:
        if not isinstance(value, self.enum_type):
            raise RegistrationError(f"Symbol '{name}' must map to a member of '{self.enum_type.__name__}', not {value!r}.")
        if symbols.get(name) is value:
            return
        try:
            symbols.put(name, value)
        except DuplicationError as e:
            raise RegistrationError(
                f"Symbol '{name}' -> {value!r} conflicts with an existing symbol of '{self.enum_type.__name__}' "
                f"('{name}' -> {symbols.get(name)!r}, {value!r} -> '{symbols.inverse.get(value)}')."
            ) from e

    def to_string(self, value: Any) -> str:
        try:
            return self._symbols.inverse[value]
        except (KeyError, TypeError):
            # TypeError: unhashable values can't have a symbol
            raise SymbolNotFoundError(self.enum_type, value) from None

    def from_string(self, name: str) -> Enum:
        try:
            return self._symbols[name]
        except (KeyError, TypeError):
            raise SymbolNotFoundError(self.enum_type, name) from None

    def snapshot(self) -> frozenbidict[str, Enum]:
        return frozenbidict(self._symbols)


class SymbolTableRegistry:
    """ Owns the symbol tables of every (owner type, enum type) pair. All enum members of one owner describing the same enum share one table. """

    def __init__(self) -> None:
        self._tables: dict[tuple[type, type[Enum]], SymbolTable] = {}
        self._lock = threading.Lock()

    def table_for(self, owner_type: type, enum_type: type[Enum]) -> SymbolTable:
        """ Returns the table for the pair, creating it on first request. Creation happens exactly once even under concurrent first use. """
        key = (owner_type, enum_type)
        table = self._tables.get(key)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(key)
            if table is None:
                get_logger().debug(f"Creating symbol table for {owner_type.__name__} / {enum_type.__name__}")
                table = SymbolTable(enum_type)
                self._tables[key] = table
            return table

    def find(self, owner_type: type, enum_type: type[Enum]) -> SymbolTable | None:
        return self._tables.get((owner_type, enum_type))
