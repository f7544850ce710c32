from .member import Member
from .enum_member import EnumMember
from .member_factories import member, enum_member, members
from .symbol_table import SymbolTable, SymbolTableRegistry
