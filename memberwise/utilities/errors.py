from typing import Any


class MemberwiseError(Exception):
    """Base class for every error raised by memberwise."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class RegistrationError(MemberwiseError):
    """Exception raised for registration errors. These indicate a mistake by the type author and are raised while a type's members are being built. """


class MemberNotFoundError(MemberwiseError):
    """ Raised when a member name is not registered for a type (or the type is not registered at all). """

    def __init__(self, owner_type: type, name: str):
        self.owner_type = owner_type
        self.name = name
        super().__init__(f"Type '{owner_type.__name__}' has no registered member named '{name}'.")


class SymbolNotFoundError(MemberwiseError, LookupError):
    """ Raised when an enum value or a symbol name has no entry in the symbol table. Failed lookups never add an entry. """

    def __init__(self, enum_type: type, symbol: Any):
        self.enum_type = enum_type
        self.symbol = symbol
        super().__init__(f"No symbol registered for {symbol!r} in enum '{enum_type.__name__}'.")


class MemberTypeError(MemberwiseError, TypeError):
    """ Raised when a requested value type, or a value being written, does not match the member's value type. """


class MemberCapabilityError(MemberwiseError):
    """ Raised when an operation is not supported by a member's access strategy.
    NOTE: This is a programming error. Callers are expected to check the capability predicates (has_reader(), can_borrow_mutable_ref() etc.) first. """


class NotAnEnumMemberError(MemberCapabilityError):
    """ Raised when an enum-only operation is requested on a member that does not hold an enum. """
