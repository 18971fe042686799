# Core type aliases for tinylisp's data model.
# Plain Python types represent both code (forms) and runtime values:
# Symbol for identifiers, float for numbers and list for compound forms.
#
# Naming guidance:
# - Expression: the unit of parsing and evaluation (code-as-data).
# - BuiltinFn:  signature shared by every entry in the builtin table.

from typing import Any, Callable, Union

from tinylisp.types.symbol import Symbol

Expression = Union[Symbol, float, list]

# Builtins receive the environment and their already-evaluated arguments
BuiltinFn = Callable[[Any, list], Expression]

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., Expression]

__version__ = "0.1.0"
