from dataclasses import dataclass
from typing import ForwardRef


@dataclass(frozen=True)
class TypeInfo:
	""" Stores type information. If the type is a generic with a single parameter, the parameter is stored within the sub_type field.
	For example list[str] will produce: type_ = list, sub_type = str
	"""
	type_: type
	sub_type: type | ForwardRef | None
