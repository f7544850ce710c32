from typing import Any, Callable, TypeVar

from ..fields.member import Member
from ..registration.member_registry import MemberRegistry, get_member_registry


R = TypeVar('R')

def is_registered(owner_type: type, *, registry: MemberRegistry | None = None) -> bool:
    """ True if owner_type was registered with at least one member. """
    return len(get_member_registry(registry).members_of(owner_type)) > 0

def get_members(owner_type: type, *, registry: MemberRegistry | None = None) -> tuple[Member, ...]:
    """ Returns the members of owner_type in registration order. Empty if the type is not registered. """
    return get_member_registry(registry).members_of(owner_type).as_tuple()

def has_member(owner_type: type, name: str, *, registry: MemberRegistry | None = None) -> bool:
    return name in get_member_registry(registry).members_of(owner_type)

def do_for_all_members(owner_type: type, visitor: Callable[[Member], Any], *, registry: MemberRegistry | None = None) -> None:
    """ Call visitor once for each member of owner_type, in registration order. Does nothing for unregistered types. """
    for member in get_member_registry(registry).members_of(owner_type):
        visitor(member)

def do_for_member(owner_type: type, name: str, value_type: Any, visitor: Callable[[Member], R], *, registry: MemberRegistry | None = None) -> R:
    """ Call visitor with the member named 'name' and return its result.
    
    Raises:
        MemberNotFoundError: owner_type has no member with that name
        MemberTypeError: the member's value type is not value_type
    """
    member = get_member_registry(registry).members_of(owner_type).find(name)
    member.check_type(value_type)
    return visitor(member)

def ctor_registered(owner_type: type, *, registry: MemberRegistry | None = None) -> bool:
    """ True if constructor arguments were registered for owner_type. Otherwise it is built with its default constructor. """
    return get_member_registry(registry).ctor_registered(owner_type)

def get_constructor_args(owner_type: type, *, registry: MemberRegistry | None = None) -> tuple[Member, ...]:
    """ Returns the members passed, in order, to the constructor of owner_type. Empty if none were registered. """
    return get_member_registry(registry).constructor_args(owner_type)
