class Undefined:
    """ Utilize this singleton when you need to disambiguate between an argument which is passed as None vs. an argument which has not been passed at all. 
    NOTE: This is currently used in:
        - member() / enum_member() value_type (None would mean NoneType)
        - set_member_value() value_type
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False

UNDEFINED = Undefined()
