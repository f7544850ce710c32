from .member_registry import MemberRegistry, TypeNameDict, get_member_registry
from .register_members import register_members, register_constructor, register_name, get_name
from .type_members import TypeMembers
from .type_expectation import TypeExpectation
from .type_info import TypeInfo
