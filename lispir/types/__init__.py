from lispir.types.symbol import Symbol
from lispir.types.void import Void, VoidType
from lispir.types.environment import Environment
from lispir.types.lambda_fn import Lambda

__all__ = ["Symbol", "Void", "VoidType", "Environment", "Lambda"]
