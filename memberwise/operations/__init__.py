from .member_queries import (
    is_registered, get_members, has_member, do_for_all_members, do_for_member, ctor_registered, get_constructor_args
)
from .member_values import get_member_value, set_member_value, get_enum_member_value_string, set_enum_member_value_string
