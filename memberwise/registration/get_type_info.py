from types import UnionType
from typing import Annotated, ClassVar, Union, get_args, get_origin

from .type_info import TypeInfo


def get_type_info(type_: type) -> TypeInfo:
    """ Extracts type and subtype (if present) for a **single** (non-Union) type. """
    origin = get_origin(type_)

    if origin is Annotated:
        # If the annotation was Annotated[list, SomeAnnotation], we want list
        base_type = get_args(type_)[0]
        return get_type_info(base_type)
    elif origin in {Union, UnionType}:
        raise ValueError("This function should only be used for single types.")
    elif origin is None:
        return TypeInfo(
            type_=type_,
            sub_type=None
        )
    elif origin is ClassVar:
        base_type = get_args(type_)[0]
        return get_type_info(base_type)
    else:
        # Generics with a single type parameter (list, set, frozenset, custom generics) keep the parameter as sub_type.
        # Anything with several parameters (dict[str, int], tuple[int, int]) only keeps the origin.
        args = get_args(type_)
        if len(args) == 1:
            return TypeInfo(
                type_=origin,
                sub_type=args[0]
            )
        return TypeInfo(
            type_=origin,
            sub_type=None
        )


def get_type_info_list(type_annotation: type | UnionType) -> list[TypeInfo]:
    """ Take in a type_annotation (or type) and returns a list of the TypeInfos contained within it.
    
    For Unioned types, returns a multiple TypeInfos. For non-Unioned types, returns a single TypeInfo.
    """
    origin = get_origin(type_annotation)
    
    if origin is Annotated:
        base_type = get_args(type_annotation)[0]
        return get_type_info_list(base_type)

    # For union types, return TypeInfo for each unioned type
    elif origin in {Union, UnionType}:
        return [get_type_info(unioned_type) for unioned_type in get_args(type_annotation)]
    
    # For single types, just return the TypeInfo for that
    else:
        return [get_type_info(type_annotation)] # type: ignore
