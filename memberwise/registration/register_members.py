from typing import Callable, Iterable, TypeVar

from .member_registry import MemberBuilder, MemberRegistry, get_member_registry


B = TypeVar('B', bound=MemberBuilder)

def register_members(owner_type: type, *, constructor_args: Iterable[str] | None = None, registry: MemberRegistry | None = None) -> Callable[[B], B]:
	""" Decorator registering a function which returns the members of owner_type.

	Example usage:
		@register_members(Point, constructor_args=("x", "y"))
		def point_members():
			return members(
				member("x", "x"),
				member("y", "y"),
			)

	The function is called once, the first time Point's members are needed.
	constructor_args optionally names the members passed, in order, to the type's constructor (see register_constructor()).
	"""
	def decorator(builder: B) -> B:
		member_registry = get_member_registry(registry)
		member_registry.register(owner_type, builder)
		if constructor_args is not None:
			member_registry.register_constructor(owner_type, constructor_args)
		return builder
	return decorator

def register_constructor(owner_type: type, *arg_names: str, registry: MemberRegistry | None = None) -> None:
	""" Register the members whose values are passed, in order, to the constructor of owner_type.
	Consumers building instances (deserializers, editors) read them back with get_constructor_args(). """
	get_member_registry(registry).register_constructor(owner_type, arg_names)

def register_name(owner_type: type, name: str, *, registry: MemberRegistry | None = None) -> None:
	get_member_registry(registry).register_name(owner_type, name)

def get_name(owner_type: type, *, registry: MemberRegistry | None = None) -> str:
	""" Returns the name registered for the type with register_name(), or its class name. """
	return get_member_registry(registry).get_name(owner_type)
