class LispirError(Exception):
    """ Base class for all lispir errors"""
    pass

class LispirSyntaxError(LispirError):
    """ Raised when the token sequence is not a well-formed list"""

class LispirExpectedOpenParen(LispirSyntaxError):
    """ Raised when a list is expected but another token is found"""

class LispirUnexpectedEof(LispirSyntaxError):
    """ Raised when tokens run out before a list is closed"""

class LispirUnboundSymbol(LispirError):
    """ Raised when a symbol has no binding in the environment chain"""

class LispirNotAFunction(LispirError):
    """ Raised when a symbol in call position is not bound to a lambda"""

class LispirArityError(LispirError):
    """ Raised when a form or function gets the wrong number of arguments"""

class LispirTypeError(LispirError):
    """ Raised when an operand or condition has the wrong kind of value"""

class LispirDivisionByZero(LispirError):
    """ Raised when dividing or taking a remainder by zero"""

class LispirOverflowError(LispirError):
    """ Raised when an integer result leaves the signed 64-bit range"""

class LispirRecursionError(LispirError):
    """ Raised when evaluation nests deeper than the configured limit"""

class LispirConfigError(LispirError):
    """ Raised when a configuration value is invalid"""
