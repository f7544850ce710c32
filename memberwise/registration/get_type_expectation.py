from types import UnionType

from .get_type_info import get_type_info_list
from .type_expectation import TypeExpectation


def get_type_expectation_from_type_annotation(type_annotation: type | UnionType) -> TypeExpectation:
	"""	### Interpret based on type annotations, including nullable types and types with sub-types. ###
	Raises ValueError for annotations we can't express as a single (optionally nullable) type, e.g. int | str.
	"""
	if isinstance(type_annotation, TypeExpectation):
		return type_annotation

	expected_type_info_list = get_type_info_list(type_annotation)
	
	is_nullable = False
	
	# If there's only one type option, the expected_type should be that option
	if len(expected_type_info_list) == 1:
		expected_type_info = expected_type_info_list[0]
	
	# If there's two type options, check to make sure the Union type is just a nullable type
	elif len(expected_type_info_list) == 2:
		non_none = [type_info for type_info in expected_type_info_list if type_info.type_ is not type(None)]
		if len(non_none) != 1:
			raise ValueError(f"Annotation '{type_annotation}' unions two types. The only union we support is a nullable type (X | None).")
		is_nullable = True
		expected_type_info = non_none[0]
	
	# We can't handle union types with three types.
	else:
		raise ValueError(f"Annotation '{type_annotation}' unions more than two types.")
	
	return TypeExpectation(
		type_info=expected_type_info,
		is_nullable=is_nullable
	)
