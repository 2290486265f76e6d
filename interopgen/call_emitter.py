"""Call Emitter - renders the C++ call performed by a wrapper body"""

from .types import CallVariant

RECEIVER_KINDS = ('method', 'destructor')


class CallEmitter:
    """Builds call expressions and documentation text for call variants"""

    def call_function(self, remap: CallVariant, container: str = "param0") -> tuple[list[str], str]:
        """Return (statements, expression) for invoking the wrapped callable.

        The expression is empty when the callable returns void; in that
        case the call itself is among the statements.
        """
        params = remap.parameters
        if remap.kind in RECEIVER_KINDS and params:
            params = params[1:]
        args = ", ".join(p.remap.pass_parameter(p.name) for p in params)

        member = remap.cpp_name.rsplit("::", 1)[-1]
        if remap.kind == 'method':
            call = f"{container}->{member}({args})"
        elif remap.kind == 'constructor':
            call = f"new {remap.cpp_name}({args})"
        elif remap.kind == 'destructor':
            call = f"delete {container}"
        else:
            call = f"{remap.cpp_name}({args})"

        if remap.void_return:
            return [f"{call};"], ""
        return [], remap.return_remap.get_return_expr(call)

    def manage_return_value(self, remap: CallVariant, return_expr: str) -> tuple[list[str], str]:
        """Take a reference on returned reference-counted pointers"""
        if not return_expr or not remap.manage_reference_count:
            return [], return_expr
        new_type = remap.return_remap.get_new_type()
        if new_type.as_pointer_type() is None:
            return [], return_expr

        return [
            f"{new_type.output_instance('return_value')} = {return_expr};",
            "if (return_value != nullptr) {",
            "  return_value->ref();",
            "}",
        ], "return_value"

    def write_orig_prototype(self, remap: CallVariant) -> str:
        """Render the signature of the wrapped C++ callable"""
        params = remap.parameters
        if remap.kind in RECEIVER_KINDS and params:
            params = params[1:]

        required = len(params) - remap.num_default_parameters
        rendered = []
        for n, p in enumerate(params):
            decl = p.remap.get_orig_type().output_instance(p.name)
            if n >= required:
                decl += " = ..."
            rendered.append(decl)

        if remap.kind in ('constructor', 'destructor'):
            head = remap.cpp_name
        elif remap.void_return:
            head = f"void {remap.cpp_name}"
        else:
            head = remap.return_remap.get_orig_type().output_instance(remap.cpp_name)
        return f"{head}({', '.join(rendered)})"
