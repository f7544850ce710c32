import inspect
from typing import Any, Generic, TypeVar, get_type_hints, TYPE_CHECKING

from ..access import access_strategy
from ..access.access_strategy import AccessStrategy, DirectStorage, ReferenceAccessors, Getter
from ..registration.get_type_expectation import get_type_expectation_from_type_annotation
from ..registration.type_expectation import TypeExpectation
from ..utilities.errors import MemberCapabilityError, MemberTypeError, NotAnEnumMemberError, RegistrationError
from ..utilities.undefined import UNDEFINED, Undefined
if TYPE_CHECKING:
	from .enum_member import EnumMember
	from .symbol_table import SymbolTableRegistry


OwnerT = TypeVar('OwnerT')
ValueT = TypeVar('ValueT')

class Member(Generic[OwnerT, ValueT]):
	""" A registered member (field) of an owner type, and the access strategy used to reach it.

	Members are created inside a type's registration function (see member() and enum_member()) and attached to
	their owner type when the type's catalog is built. After that they never change.

	The access operations mirror the three ways of borrowing a field:
		- get(obj): the stored object itself, which callers must not mutate
		- get_copy(obj): a copy the caller owns
		- get_ref(obj): the stored object, for in-place mutation
	Check the matching capability predicate first. Calling an operation the strategy can't support raises MemberCapabilityError.
	"""

	def __init__(self, name: str, strategy: AccessStrategy, value_type: Any | Undefined = UNDEFINED) -> None:
		self._name = name
		self._strategy = strategy
		self._owner_type: type[OwnerT] | None = None
		self._value_type: TypeExpectation | None = None
		if value_type is not UNDEFINED:
			self._value_type = _parse_value_type(value_type, name, RegistrationError)

	def __repr__(self) -> str:
		owner_name = self._owner_type.__name__ if self._owner_type is not None else '?'
		value_type = self._value_type if self._value_type is not None else '?'
		return f"{type(self).__name__}({owner_name}.{self._name}: {value_type})"

	@property
	def name(self) -> str:
		return self._name

	@property
	def strategy(self) -> AccessStrategy:
		return self._strategy

	@property
	def owner_type(self) -> type[OwnerT]:
		if self._owner_type is None:
			raise RegistrationError(f"Member '{self._name}' has not been attached to an owner type yet.")
		return self._owner_type

	@property
	def value_type(self) -> TypeExpectation:
		if self._value_type is None:
			raise RegistrationError(f"The value type of member '{self._name}' is not known until it is attached to an owner type.")
		return self._value_type

	def is_attached(self) -> bool:
		return self._owner_type is not None

	## Registration ##

	def add_mutable_getter(self, mutable_getter: Getter) -> 'Member[OwnerT, ValueT]':
		""" Allow in-place mutation through get_ref(). Only members using reference accessors take a mutable getter,
		since direct storage can always be borrowed mutably and value getters hand out copies. """
		self._ensure_not_attached()
		if not isinstance(self._strategy, ReferenceAccessors):
			raise RegistrationError(f"Member '{self._name}' does not use reference accessors, so it can't take a mutable getter.")
		self._strategy = self._strategy.with_mutable_getter(mutable_getter)
		return self

	def _ensure_not_attached(self) -> None:
		if self._owner_type is not None:
			raise RegistrationError(f"Member '{self._name}' of '{self._owner_type.__name__}' is already registered and can no longer be modified.")

	def _attach(self, owner_type: type, symbol_tables: 'SymbolTableRegistry') -> None:
		""" Bind this member to its owner type. Called once by the registry while it builds the owner's catalog. """
		if self._owner_type is not None:
			# A member of a base class may be listed again in the catalog of a subclass
			if issubclass(owner_type, self._owner_type):
				return
			raise RegistrationError(f"Member '{self._name}' already belongs to '{self._owner_type.__name__}' and can't be registered for '{owner_type.__name__}'.")

		value_type = self._value_type if self._value_type is not None else self._infer_value_type(owner_type)
		self._on_attach(owner_type, value_type, symbol_tables)
		# Nothing is recorded on the member unless every step succeeded
		self._value_type = value_type
		self._owner_type = owner_type

	def _on_attach(self, owner_type: type, value_type: TypeExpectation, symbol_tables: 'SymbolTableRegistry') -> None:
		pass

	def _infer_value_type(self, owner_type: type) -> TypeExpectation:
		""" Read the value type from the owner's annotations (direct storage) or from the accessors' annotations. """
		strategy = self._strategy
		try:
			if isinstance(strategy, DirectStorage):
				hints = get_type_hints(owner_type)
				annotation = hints.get(strategy.attribute, UNDEFINED)
			elif strategy.getter is not None:
				annotation = get_type_hints(strategy.getter).get('return', UNDEFINED)
			else:
				annotation = _get_setter_value_annotation(strategy.setter)
		except (NameError, TypeError) as e:
			raise RegistrationError(f"Unable to resolve annotations for member '{self._name}' of '{owner_type.__name__}': {e}") from e

		if annotation is UNDEFINED:
			raise RegistrationError(f"Unable to infer the value type of member '{self._name}' of '{owner_type.__name__}'. Annotate the field or accessor, or pass value_type explicitly.")
		return _parse_value_type(annotation, self._name, RegistrationError)

	## Capabilities ##

	def has_direct_storage(self) -> bool:
		return access_strategy.has_direct_storage(self._strategy)

	def has_reader(self) -> bool:
		return access_strategy.has_reader(self._strategy)

	def has_writer(self) -> bool:
		return access_strategy.has_writer(self._strategy)

	def can_borrow_const_ref(self) -> bool:
		return access_strategy.can_borrow_const_ref(self._strategy)

	def can_borrow_mutable_ref(self) -> bool:
		return access_strategy.can_borrow_mutable_ref(self._strategy)

	def is_enum(self) -> bool:
		""" True if this member can be viewed as an EnumMember with as_enum(). """
		return False

	def as_enum(self) -> 'EnumMember[OwnerT, Any]':
		raise NotAnEnumMemberError(f"Member '{self._name}' of type '{self.value_type}' is not an enum member.")

	## Type checks ##

	def matches(self, value_type: Any) -> bool:
		""" Returns True if value_type (a type or annotation) is this member's value type. """
		return self.value_type.matches(_parse_value_type(value_type, self._name, MemberTypeError))

	def check_type(self, value_type: Any) -> None:
		if not self.matches(value_type):
			raise MemberTypeError(f"Member '{self.owner_type.__name__}.{self._name}' has type '{self.value_type}', but '{getattr(value_type, '__name__', value_type)}' was requested.")

	## Access ##

	def attribute(self) -> str:
		""" The name of the attribute holding this member. Only valid if has_direct_storage(). """
		if not isinstance(self._strategy, DirectStorage):
			raise MemberCapabilityError(f"Member '{self._name}' has no direct storage.")
		return self._strategy.attribute

	def get(self, obj: OwnerT) -> ValueT:
		return access_strategy.read_const_ref(self._strategy, obj)

	def get_copy(self, obj: OwnerT) -> ValueT:
		return access_strategy.read_value(self._strategy, obj)

	def get_ref(self, obj: OwnerT) -> ValueT:
		return access_strategy.read_mutable_ref(self._strategy, obj)

	def set(self, obj: OwnerT, value: Any) -> None:
		""" Write value into obj. Raises MemberTypeError (and leaves obj untouched) if the value can't be stored as this member's type. """
		converted_value = self.value_type.convert(value, self._name)
		access_strategy.write(self._strategy, obj, converted_value)


def _parse_value_type(value_type: Any, member_name: str, error_cls: type[Exception]) -> TypeExpectation:
	try:
		return get_type_expectation_from_type_annotation(value_type)
	except ValueError as e:
		raise error_cls(f"Unsupported value type for member '{member_name}': {e}") from e

def _get_setter_value_annotation(setter: Any) -> Any:
	""" Returns the annotation of the value parameter of a setter(obj, value), or UNDEFINED. """
	parameters = list(inspect.signature(setter).parameters.values())
	if len(parameters) < 2:
		return UNDEFINED
	return get_type_hints(setter).get(parameters[1].name, UNDEFINED)
