from enum import Enum
from typing import Any, Callable

from ..access.access_strategy import AccessStrategy, DirectStorage, ReferenceAccessors, ValueAccessors, Getter, Setter
from ..utilities.errors import RegistrationError
from ..utilities.undefined import UNDEFINED, Undefined
from .enum_member import EnumMember
from .member import Member

"""
Factories used inside registration functions, so you can write

	member("x", "x")
	member("age", Person.get_age, Person.set_age)
	member("name", Person.name)                                  # a property
	member("tags", Person.get_tags, Person.set_tags, by_reference=True, mutable_getter=Person.tags_mut)

instead of constructing access strategies by hand.

The second argument picks the access strategy:
	- a str is the name of the attribute storing the field (direct storage)
	- a property, or a getter function (with the setter as third argument), selects accessors
Accessors are returned by value unless by_reference=True. A member never holds both accessors and direct storage:
if a field has accessors, register the accessors.
"""

def member(
		name: str,
		target: str | property | Getter | None,
		setter: Setter | None = None,
		*,
		by_reference: bool = False,
		mutable_getter: Getter | None = None,
		value_type: Any | Undefined = UNDEFINED
	) -> Member:
	""" Declare a member. If value_type is not given, it is read from the annotations when the member is registered. """
	strategy = _make_strategy(name, target, setter, by_reference)
	new_member = Member(name, strategy, value_type)
	if mutable_getter is not None:
		new_member.add_mutable_getter(mutable_getter)
	return new_member

def enum_member(
		name: str,
		target: str | property | Getter | None,
		setter: Setter | None = None,
		*,
		by_reference: bool = False,
		mutable_getter: Getter | None = None,
		value_type: type[Enum] | Undefined = UNDEFINED
	) -> EnumMember:
	""" Declare a member holding an enum. Chain .value(symbol, enum_value) to declare its string symbols. """
	if value_type is not UNDEFINED and not (isinstance(value_type, type) and issubclass(value_type, Enum)):
		raise RegistrationError(f"enum_member '{name}' requires an Enum type, got {value_type!r}.")
	strategy = _make_strategy(name, target, setter, by_reference)
	new_member = EnumMember(name, strategy, value_type)
	if mutable_getter is not None:
		new_member.add_mutable_getter(mutable_getter)
	return new_member

def members(*args: Member) -> tuple[Member, ...]:
	""" Collect the members returned by a registration function, in order. """
	for arg in args:
		if not isinstance(arg, Member):
			raise RegistrationError(f"members() only accepts members created with member() or enum_member(), got {arg!r}.")
	return args

def _make_strategy(name: str, target: Any, setter: Callable | None, by_reference: bool) -> AccessStrategy:
	if isinstance(target, str):
		if setter is not None or by_reference:
			raise RegistrationError(f"Member '{name}' uses direct storage ('{target}'), which takes no setter and can't be by_reference.")
		return DirectStorage(attribute=target)

	if isinstance(target, property):
		if setter is not None:
			raise RegistrationError(f"Member '{name}' is a property, so its setter comes from the property.")
		getter, setter = target.fget, target.fset
	elif target is None or callable(target):
		getter = target
	else:
		raise RegistrationError(f"Member '{name}' needs an attribute name, a property or a getter, got {target!r}.")

	if getter is None and setter is None:
		raise RegistrationError(f"Member '{name}' has neither a getter nor a setter.")
	if setter is not None and not callable(setter):
		raise RegistrationError(f"Setter of member '{name}' is not callable.")

	if by_reference:
		return ReferenceAccessors(getter=getter, setter=setter)
	return ValueAccessors(getter=getter, setter=setter)
