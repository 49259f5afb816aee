from minifun.ast.nodes import Expression
from minifun.typechecker.infer import InferenceResult, infer
from minifun.typechecker.types import format_constraint


def get_constraints_str(result: InferenceResult) -> str:
    res = "Context:\n"
    for name, typ in result.context.items():
        res += f"  {name} :: {typ}\n"
    res += "Constraints:\n"
    for constraint in result.constraints:
        res += f"  {format_constraint(constraint)}\n"
    return res


def get_result_str(result: InferenceResult) -> str:
    res = get_constraints_str(result)

    if result.substitution is None:
        res += f"Type inference failed: {result.error}"
        return res

    res += "Substitution:\n"
    for var, typ in result.substitution.items():
        res += f"  t{var} := {typ}\n"

    resolved = result.resolved_context() or {}
    if resolved:
        res += "Free variables:\n"
        for name, typ in resolved.items():
            res += f"  {name} :: {typ}\n"
    res += f"Type: {result.principal_type()}\n"
    return res


def get_type_str(ast: Expression) -> str:
    """Get the full inference report for an expression."""
    return get_result_str(infer(ast))


def type_check(ast: Expression) -> bool:
    result = infer(ast)
    if not result.ok:
        print(f"Type checking failed: {result.error}")
        return False
    return True
