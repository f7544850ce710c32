from typing import Any, Iterable, Iterator, TYPE_CHECKING

from ..utilities.errors import MemberNotFoundError, RegistrationError
if TYPE_CHECKING:
    from ..fields.member import Member
    from ..fields.symbol_table import SymbolTableRegistry


class TypeMembers:
    """ The catalog of one owner type: its members, in registration order, indexed by name.
    Built once by the MemberRegistry and never modified afterwards. """

    def __init__(self, owner_type: type, members: Iterable['Member'], symbol_tables: 'SymbolTableRegistry') -> None:
        from ..fields.member import Member

        self.owner_type = owner_type
        self._members: dict[str, Member] = {}

        member_list = list(members)
        for member in member_list:
            if not isinstance(member, Member):
                raise RegistrationError(f"Registration of '{owner_type.__name__}' returned {member!r}, which is not a member.")
            # Member names must be unique within a type
            if member.name in self._members:
                raise RegistrationError(f"'{owner_type.__name__}' registers member '{member.name}' more than once.")
            self._members[member.name] = member

        # Only attach once the whole list is known to be valid
        for member in member_list:
            member._attach(owner_type, symbol_tables)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator['Member']:
        return iter(self._members.values())

    def __contains__(self, name: Any) -> bool:
        return name in self._members

    def __repr__(self) -> str:
        return f"TypeMembers({self.owner_type.__name__}: {', '.join(self._members)})"

    def names(self) -> tuple[str, ...]:
        return tuple(self._members)

    def get(self, name: str) -> 'Member | None':
        return self._members.get(name)

    def find(self, name: str) -> 'Member':
        """ Raises MemberNotFoundError if no member has that name. """
        member = self._members.get(name)
        if member is None:
            raise MemberNotFoundError(self.owner_type, name)
        return member

    def as_tuple(self) -> tuple['Member', ...]:
        return tuple(self._members.values())
