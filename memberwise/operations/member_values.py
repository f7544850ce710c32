from enum import Enum
from typing import Any

from ..fields.member import Member
from ..registration.member_registry import MemberRegistry, get_member_registry
from ..utilities.undefined import UNDEFINED, Undefined
from .member_queries import do_for_member

"""
Name based access to member values. The owner type is always the exact type of obj.
All of these raise MemberNotFoundError for unknown names and MemberTypeError for mismatched types. Nothing is ever defaulted.
"""

def get_member_value(obj: Any, name: str, value_type: Any, *, registry: MemberRegistry | None = None) -> Any:
	""" Returns a copy of the value of member 'name' of obj. """
	return do_for_member(type(obj), name, value_type, lambda member: member.get_copy(obj), registry=registry)

def set_member_value(obj: Any, name: str, value: Any, value_type: Any | Undefined = UNDEFINED, *, registry: MemberRegistry | None = None) -> None:
	""" Set the value of member 'name' of obj. If value_type is not given, the member's own type is used, and the value is still checked against it. """
	if value_type is UNDEFINED:
		member = get_member_registry(registry).members_of(type(obj)).find(name)
		member.set(obj, value)
		return
	do_for_member(type(obj), name, value_type, lambda member: member.set(obj, value), registry=registry)

def get_enum_member_value_string(obj: Any, name: str, enum_type: type[Enum] | Undefined = UNDEFINED, *, registry: MemberRegistry | None = None) -> str:
	""" Returns the symbol of the enum value stored in member 'name' of obj.
	
	Raises:
		NotAnEnumMemberError: the member is not an enum member
		SymbolNotFoundError: the stored value has no symbol
	"""
	member = _find_enum_member(obj, name, enum_type, registry)
	return member.as_enum().to_string(member.get_copy(obj))

def set_enum_member_value_string(obj: Any, name: str, symbol: str, enum_type: type[Enum] | Undefined = UNDEFINED, *, registry: MemberRegistry | None = None) -> None:
	""" Set member 'name' of obj to the enum value registered under symbol. obj is left untouched if the symbol is unknown. """
	enum_member = _find_enum_member(obj, name, enum_type, registry).as_enum()
	enum_member.set(obj, enum_member.from_string(symbol))

def _find_enum_member(obj: Any, name: str, enum_type: type[Enum] | Undefined, registry: MemberRegistry | None) -> Member:
	member = get_member_registry(registry).members_of(type(obj)).find(name)
	if enum_type is not UNDEFINED:
		member.check_type(enum_type)
	return member
