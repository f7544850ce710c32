from enum import Enum
from typing import Any, TypeVar, TYPE_CHECKING

from bidict import frozenbidict

from .member import Member, OwnerT
from ..utilities.errors import RegistrationError
if TYPE_CHECKING:
	from .symbol_table import SymbolTable, SymbolTableRegistry
	from ..registration.type_expectation import TypeExpectation


EnumT = TypeVar('EnumT', bound=Enum)

class EnumMember(Member[OwnerT, EnumT]):
	""" A member holding an enum value, with string symbols for its values.

	Symbols are declared while registering, with the fluent value() call:
		enum_member("color", "color").value("RED", Color.RED).value("GREEN", Color.GREEN)

	They are kept aside until the member is attached to its owner, then written into the symbol table shared by
	every enum member of that owner with the same enum type.
	"""

	def __init__(self, *args: Any, **kwargs: Any) -> None:
		super().__init__(*args, **kwargs)
		self._pending_symbols: list[tuple[str, EnumT]] = []
		self._symbol_table: 'SymbolTable | None' = None

	def value(self, name: str, enum_value: EnumT) -> 'EnumMember[OwnerT, EnumT]':
		""" Register name as the symbol of enum_value. """
		self._ensure_not_attached()
		self._pending_symbols.append((name, enum_value))
		return self

	register_symbol = value

	def _on_attach(self, owner_type: type, value_type: 'TypeExpectation', symbol_tables: 'SymbolTableRegistry') -> None:
		if not value_type.is_enum():
			raise RegistrationError(f"Enum member '{self.name}' of '{owner_type.__name__}' has non-enum type '{value_type}'.")
		table = symbol_tables.table_for(owner_type, value_type.type_)
		# Either every pending symbol is written, or none is
		table.register_all(self._pending_symbols)
		self._pending_symbols.clear()
		self._symbol_table = table

	@property
	def enum_type(self) -> type[EnumT]:
		return self.value_type.type_

	def is_enum(self) -> bool:
		return True

	def as_enum(self) -> 'EnumMember[OwnerT, EnumT]':
		return self

	def to_string(self, enum_value: EnumT) -> str:
		""" Raises SymbolNotFoundError if no symbol was registered for the value. """
		return self._table().to_string(enum_value)

	def from_string(self, name: str) -> EnumT:
		""" Raises SymbolNotFoundError if the name was never registered. """
		return self._table().from_string(name) # type: ignore

	def symbols(self) -> frozenbidict[str, EnumT]:
		""" All registered symbols, name -> value. Use .inverse for value -> name. """
		return self._table().snapshot() # type: ignore

	def _table(self) -> 'SymbolTable':
		if self._symbol_table is None:
			raise RegistrationError(f"Enum member '{self.name}' has not been registered to a type yet, so its symbols are not available.")
		return self._symbol_table
