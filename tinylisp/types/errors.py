class TinyLispError(Exception):
    """ Base class for all tinylisp errors"""

class TinyLispSyntaxError(TinyLispError):
    """ Raised when the token stream does not form an expression"""

class TinyLispUnboundSymbol(TinyLispError):
    """ Raised when a symbol is evaluated before it is bound"""

class TinyLispUndefinedFunction(TinyLispError):
    """ Raised when the head of a form names no special form or builtin"""

class TinyLispArityError(TinyLispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class TinyLispTypeError(TinyLispError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class TinyLispEvalError(TinyLispError):
    """ Raised when a form has a shape that cannot be evaluated, or nests too deeply"""
