"""Parameter remaps - how a C++ type is presented at the exported C boundary"""

from .types import CppType, SimpleType, unwrap_qualifiers


class ParameterRemap:
    """Pairs the original C++ type with the type the wrapper exposes"""

    def __init__(self, orig_type: CppType):
        self.orig_type = orig_type
        self.new_type = orig_type

    def get_orig_type(self) -> CppType:
        return self.orig_type

    def get_new_type(self) -> CppType:
        return self.new_type

    def pass_parameter(self, variable_name: str) -> str:
        """Expression converting a wrapper argument to the original type"""
        return variable_name

    def get_return_expr(self, expression: str) -> str:
        """Expression converting an original return value to the new type"""
        return expression


class ParameterRemapUnchanged(ParameterRemap):
    """Passes the value through as-is"""


class ParameterRemapHandleToInt(ParameterRemap):
    """Exposes a handle type as its integer index"""

    def __init__(self, orig_type: CppType):
        super().__init__(orig_type)
        self.handle_name = unwrap_qualifiers(orig_type).get_local_name()
        self.new_type = SimpleType('int')

    def pass_parameter(self, variable_name: str) -> str:
        return f"{self.handle_name}::from_index({variable_name})"

    def get_return_expr(self, expression: str) -> str:
        return f"({expression}).get_index()"
