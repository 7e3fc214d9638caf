# Core type aliases for lispir's data model.
# Plain Python types (int, bool, list) represent both code (forms) and runtime
# values, alongside Symbol, Void and Lambda from lispir.types.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (syntax and values share one representation)
SExpression = LispValue

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., LispValue]
