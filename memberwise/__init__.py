"""
memberwise

Static member reflection: register the members of a type once, then read, write and enumerate them by name.
The module maintains a stateful `member_registry` object, used by every operation unless a registry is passed explicitly.

Example usage:
	from memberwise import member, members, register_members, get_member_value

	@register_members(Point)
	def point_members():
		return members(
			member("x", "x"),
			member("y", "y"),
		)

	get_member_value(Point(1, 2), "x", int) # 1
"""

from .registration.member_registry import MemberRegistry

# Expose these at the module level
from .access.access_strategy import AccessStrategy, DirectStorage, ValueAccessors, ReferenceAccessors
from .fields import Member, EnumMember, member, enum_member, members
from .registration import register_members, register_constructor, register_name, get_name
from .operations import (
	is_registered, get_members, has_member, do_for_all_members, do_for_member, ctor_registered, get_constructor_args,
	get_member_value, set_member_value, get_enum_member_value_string, set_enum_member_value_string
)
from .utilities.errors import (
	MemberwiseError, RegistrationError, MemberNotFoundError, SymbolNotFoundError,
	MemberTypeError, MemberCapabilityError, NotAnEnumMemberError
)
from .utilities.logger import set_logger, set_log_level
from .utilities.undefined import UNDEFINED


# Module-level stateful variable, populated as types register their members
member_registry: MemberRegistry = MemberRegistry()
