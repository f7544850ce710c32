import threading
from typing import Callable, Iterable, TYPE_CHECKING

from bidict import bidict

from .type_members import TypeMembers
from ..fields.symbol_table import SymbolTableRegistry
from ..utilities.errors import RegistrationError
from ..utilities.logger import get_logger
if TYPE_CHECKING:
    from ..fields.member import Member


__register_members__ = "__register_members__"
""" A type may define this classmethod (returning its members) instead of using the @register_members decorator. """

__constructor_args__ = "__constructor_args__"
""" A type may define this class attribute (a sequence of member names) instead of calling register_constructor(). """

MemberBuilder = Callable[[], Iterable['Member']]


class TypeNameDict(bidict[str, type]):
    def add(self, type_: type, name: str | None = None) -> None:
        """Register a single type by its name (its class name, unless given)."""
        self[name if name is not None else type_.__name__] = type_


class MemberRegistry:
    """ Stores the member catalog of every registered type.

    A type is registered by handing the registry a builder function that returns the type's members. The builder
    is not called until the type's catalog is first needed, and is called exactly once, even when several threads
    ask for the catalog at the same time. After that, catalogs are read without locking.

    Types which were never registered behave as if they had no members.
    """

    def __init__(self) -> None:
        self._builders: dict[type, MemberBuilder] = {}
        self._catalogs: dict[type, TypeMembers] = {}
        self._constructor_args: dict[type, tuple[str, ...]] = {}
        self._lock = threading.RLock() # Re-entrant, so a builder may look up the catalog of another type
        self.symbol_tables = SymbolTableRegistry()
        self.type_name_dict = TypeNameDict()

    def __repr__(self) -> str:
        return f"MemberRegistry({len(self._builders)} registered, {len(self._catalogs)} built)"

    ## Registration ##

    def register(self, owner_type: type, builder: MemberBuilder) -> None:
        """ Register the builder for a type. Each type can only be registered once. """
        if not isinstance(owner_type, type):
            raise RegistrationError(f"Only classes can be registered, got {owner_type!r}.")
        with self._lock:
            if owner_type in self._builders or __register_members__ in vars(owner_type):
                raise RegistrationError(f"Members of '{owner_type.__name__}' are already registered.")
            self._builders[owner_type] = builder
        get_logger().debug(f"Registered member builder for '{owner_type.__name__}'")

    def register_constructor(self, owner_type: type, arg_names: Iterable[str]) -> None:
        """ Register the members whose values, in this order, are the arguments of owner_type's constructor.
        Names are checked against the catalog when it is built. """
        if not isinstance(owner_type, type):
            raise RegistrationError(f"Only classes can be registered, got {owner_type!r}.")
        arg_names = tuple(arg_names)
        with self._lock:
            if owner_type in self._constructor_args or __constructor_args__ in vars(owner_type):
                raise RegistrationError(f"Constructor arguments of '{owner_type.__name__}' are already registered.")
            catalog = self._catalogs.get(owner_type)
            if catalog is not None:
                _check_constructor_args(catalog, arg_names)
            self._constructor_args[owner_type] = arg_names
        get_logger().debug(f"Registered constructor arguments for '{owner_type.__name__}': {', '.join(arg_names)}")

    def register_name(self, owner_type: type, name: str) -> None:
        """ Give a type a name, used by get_name() in place of its class name. Names must be unique. """
        with self._lock:
            if owner_type in self.type_name_dict.inverse:
                raise RegistrationError(f"'{owner_type.__name__}' already has the name '{self.type_name_dict.inverse[owner_type]}'.")
            if name in self.type_name_dict:
                raise RegistrationError(f"Name '{name}' is already used by '{self.type_name_dict[name].__name__}'.")
            self.type_name_dict.add(owner_type, name)

    def get_name(self, owner_type: type) -> str:
        return self.type_name_dict.inverse.get(owner_type, owner_type.__name__)

    def lookup_type_by_name(self, name: str) -> type | None:
        """ Returns None if no type was registered under that name. """
        return self.type_name_dict.get(name)

    ## Catalogs ##

    def has_builder(self, owner_type: type) -> bool:
        return self._find_builder(owner_type) is not None

    def members_of(self, owner_type: type) -> TypeMembers:
        """ Returns the catalog for owner_type, building it on first use. """
        catalog = self._catalogs.get(owner_type)
        if catalog is not None:
            return catalog

        with self._lock:
            catalog = self._catalogs.get(owner_type)
            if catalog is not None:
                return catalog

            builder = self._find_builder(owner_type)
            if builder is None:
                # Not cached, so the type may still be registered later
                return TypeMembers(owner_type, (), self.symbol_tables)

            get_logger().debug(f"Building member catalog for '{owner_type.__name__}'...")
            catalog = TypeMembers(owner_type, builder(), self.symbol_tables)
            arg_names = self._find_constructor_args(owner_type)
            if arg_names is not None:
                _check_constructor_args(catalog, arg_names)
            self._catalogs[owner_type] = catalog
            get_logger().debug(f"Built member catalog for '{owner_type.__name__}': {', '.join(catalog.names())}")
            return catalog

    def _find_builder(self, owner_type: type) -> MemberBuilder | None:
        builder = self._builders.get(owner_type)
        if builder is not None:
            return builder
        # Only a hook defined on the class itself counts. Subclasses don't inherit their parent's catalog.
        if __register_members__ in vars(owner_type):
            return getattr(owner_type, __register_members__)
        return None

    def is_built(self, owner_type: type) -> bool:
        return owner_type in self._catalogs

    def built_types(self) -> list[type]:
        return list(self._catalogs)

    ## Constructors ##

    def ctor_registered(self, owner_type: type) -> bool:
        """ True if the members passed to owner_type's constructor were registered. """
        return self._find_constructor_args(owner_type) is not None

    def constructor_args(self, owner_type: type) -> tuple['Member', ...]:
        """ Returns the members whose values are the arguments of owner_type's constructor, in order.
        Empty if no constructor was registered, meaning the type is built with its default constructor. """
        arg_names = self._find_constructor_args(owner_type)
        if arg_names is None:
            return ()
        catalog = self.members_of(owner_type)
        _check_constructor_args(catalog, arg_names)
        return tuple(catalog.find(name) for name in arg_names)

    def _find_constructor_args(self, owner_type: type) -> tuple[str, ...] | None:
        arg_names = self._constructor_args.get(owner_type)
        if arg_names is not None:
            return arg_names
        if __constructor_args__ in vars(owner_type):
            return tuple(getattr(owner_type, __constructor_args__))
        return None


def get_member_registry(registry: MemberRegistry | None = None) -> MemberRegistry:
    """ Returns registry, or the package-level member_registry if registry is None. """
    if registry is not None:
        return registry
    from .. import member_registry
    return member_registry

def _check_constructor_args(catalog: TypeMembers, arg_names: tuple[str, ...]) -> None:
    for name in arg_names:
        if name not in catalog:
            raise RegistrationError(f"Constructor argument '{name}' of '{catalog.owner_type.__name__}' is not one of its members.")
