from .access_strategy import AccessStrategy, DirectStorage, ValueAccessors, ReferenceAccessors
