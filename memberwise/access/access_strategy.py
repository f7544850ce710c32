import copy
from dataclasses import dataclass, replace
from typing import Any, Callable, TypeAlias

from ..utilities.errors import MemberCapabilityError


Getter: TypeAlias = Callable[[Any], Any]
Setter: TypeAlias = Callable[[Any, Any], None]


@dataclass(frozen=True)
class DirectStorage:
	""" The field lives in an attribute of the object. The presence of this variant is the 'has direct storage' flag. """
	attribute: str


@dataclass(frozen=True)
class ValueAccessors:
	""" The field is reached through a getter returning a value the caller owns, and a setter accepting a value. """
	getter: Getter | None
	setter: Setter | None


@dataclass(frozen=True)
class ReferenceAccessors:
	""" The field is reached through a getter returning the live object held by the owner.
	mutable_getter is optional, and is only set for owners which allow in-place mutation of the field. """
	getter: Getter | None
	setter: Setter | None
	mutable_getter: Getter | None = None

	def with_mutable_getter(self, mutable_getter: Getter) -> 'ReferenceAccessors':
		return replace(self, mutable_getter=mutable_getter)


AccessStrategy: TypeAlias = DirectStorage | ValueAccessors | ReferenceAccessors


## Capabilities ##

def has_direct_storage(strategy: AccessStrategy) -> bool:
	return isinstance(strategy, DirectStorage)

def has_reader(strategy: AccessStrategy) -> bool:
	match strategy:
		case DirectStorage():
			return True
		case ValueAccessors(getter=getter) | ReferenceAccessors(getter=getter):
			return getter is not None
	raise TypeError(f"Unknown access strategy {strategy!r}.")

def has_writer(strategy: AccessStrategy) -> bool:
	match strategy:
		case DirectStorage():
			return True
		case ValueAccessors(setter=setter) | ReferenceAccessors(setter=setter):
			return setter is not None
	raise TypeError(f"Unknown access strategy {strategy!r}.")

def can_borrow_const_ref(strategy: AccessStrategy) -> bool:
	match strategy:
		case DirectStorage():
			return True
		case ReferenceAccessors(getter=getter):
			return getter is not None
		case ValueAccessors():
			return False
	raise TypeError(f"Unknown access strategy {strategy!r}.")

def can_borrow_mutable_ref(strategy: AccessStrategy) -> bool:
	match strategy:
		case DirectStorage():
			return True
		case ReferenceAccessors(mutable_getter=mutable_getter):
			return mutable_getter is not None
		case ValueAccessors():
			return False
	raise TypeError(f"Unknown access strategy {strategy!r}.")


## Access ##

def read_const_ref(strategy: AccessStrategy, obj: Any) -> Any:
	""" Return the object stored in the field, without copying it. Callers must not mutate the result. """
	match strategy:
		case DirectStorage(attribute=attribute):
			return getattr(obj, attribute)
		case ReferenceAccessors(getter=getter) if getter is not None:
			return getter(obj)
	raise MemberCapabilityError(f"Access strategy {strategy!r} cannot lend a read-only reference.")

def read_value(strategy: AccessStrategy, obj: Any) -> Any:
	""" Return a copy of the field's value. Value getters already hand back a value the caller owns, so their result is returned as is. """
	match strategy:
		case ValueAccessors(getter=getter) if getter is not None:
			return getter(obj)
		case DirectStorage():
			return copy.copy(read_const_ref(strategy, obj))
		case ReferenceAccessors(getter=getter) if getter is not None:
			return copy.copy(getter(obj))
	raise MemberCapabilityError(f"Access strategy {strategy!r} has no reader.")

def read_mutable_ref(strategy: AccessStrategy, obj: Any) -> Any:
	""" Return the live object stored in the field, for in-place mutation. """
	match strategy:
		case DirectStorage(attribute=attribute):
			return getattr(obj, attribute)
		case ReferenceAccessors(mutable_getter=mutable_getter) if mutable_getter is not None:
			return mutable_getter(obj)
	raise MemberCapabilityError(f"Access strategy {strategy!r} cannot lend a mutable reference.")

def write(strategy: AccessStrategy, obj: Any, value: Any) -> None:
	match strategy:
		case DirectStorage(attribute=attribute):
			setattr(obj, attribute, value)
			return
		case ValueAccessors(setter=setter) | ReferenceAccessors(setter=setter) if setter is not None:
			setter(obj, value)
			return
	raise MemberCapabilityError(f"Access strategy {strategy!r} has no writer.")
