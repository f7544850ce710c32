from dataclasses import dataclass
from enum import Enum
from collections.abc import Collection, Mapping
from typing import Any, get_origin

from .type_info import TypeInfo
from ..utilities.errors import MemberTypeError


@dataclass(frozen=True)
class TypeExpectation:
	""" The value type of a member: a single type (with an optional sub type), possibly nullable. """
	type_info: TypeInfo
	is_nullable: bool

	def __str__(self) -> str:
		output = getattr(self.type_info.type_, '__name__', str(self.type_info.type_))
		if self.type_info.sub_type is not None:
			if isinstance(self.type_info.sub_type, type):
				output += f"[{self.type_info.sub_type.__name__}]"
			else:
				output += f"[{self.type_info.sub_type}]" # Handle FowardRefs
		if self.is_nullable:
			output += " | None"

		return output

	@property
	def type_(self) -> type:
		return self.type_info.type_

	def is_enum(self) -> bool:
		return isinstance(self.type_, type) and issubclass(self.type_, Enum)

	def matches(self, other: 'TypeExpectation') -> bool:
		""" Two expectations match when they describe the same type and sub type. Nullability is not compared. """
		return self.type_info == other.type_info

	def convert(self, value: Any, member_name: str) -> Any:
		""" Returns the value to store for this expectation, or raises MemberTypeError if the value can't be stored.
		The only conversion performed is int -> float, since every int is a valid float. """
		if self._is_valid_value(value):
			return value
		if self.type_ is float and isinstance(value, int) and not isinstance(value, bool):
			return float(value)
		raise MemberTypeError(f"Value {value!r} of type '{type(value).__name__}' cannot be stored in member '{member_name}' of type '{self}'.")

	def _is_valid_value(self, value: Any) -> bool:
		""" Validate that a value is consistent with this TypeExpectation. """
		if value is None:
			return self.is_nullable or self.type_ is type(None)
		if self.type_ is Any:
			return True
		if not isinstance(value, self.type_):
			return False

		# Containers with a single concrete item type (list[str], set[Color], ...) have their items checked too
		sub_type = self.type_info.sub_type
		if _is_concrete_type(sub_type) and isinstance(value, Collection) and not isinstance(value, (str, bytes, Mapping)):
			return all(_is_valid_item(item, sub_type) for item in value)
		return True


def _is_concrete_type(type_: Any) -> bool:
	return isinstance(type_, type) and type_ is not Any and get_origin(type_) is None

def _is_valid_item(item: Any, item_type: type) -> bool:
	if item_type is float and isinstance(item, int) and not isinstance(item, bool):
		return True
	return isinstance(item, item_type)
