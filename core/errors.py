"""core/errors.py - 表达式解析与求值的错误类型"""


class ExpressionError(Exception):
    """所有表达式错误的基类"""


# 结构校验错误（转换前检测）=======================

class StructuralError(ExpressionError):
    pass


class LeadingOperatorError(StructuralError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Expression must start with a number, got '{symbol}'")


class TrailingOperatorError(StructuralError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Expression must end with a number, got trailing '{symbol}'")


class ConsecutiveOperatorError(StructuralError):
    def __init__(self, prev, curr):
        self.prev = prev
        self.curr = curr
        super().__init__(f"Consecutive operators '{prev}' and '{curr}'")


class InvalidSymbolError(StructuralError):
    def __init__(self, symbol, position):
        self.symbol = symbol
        self.position = position  # 从1开始计数
        super().__init__(f"Invalid symbol '{symbol}' at position {position}")


# 括号错误（转换时检测）============================

class UnmatchedParenthesisError(ExpressionError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Unmatched parenthesis '{symbol}'")


# 求值错误 ========================================

class EvaluationError(ExpressionError):
    pass


class InsufficientOperandsError(EvaluationError):
    def __init__(self, operator, available):
        self.operator = operator
        self.available = available
        super().__init__(f"Insufficient operands for '{operator}': need 2, have {available}")


class MalformedExpressionError(EvaluationError):
    def __init__(self, stack_size):
        self.stack_size = stack_size
        super().__init__(f"Malformed expression: {stack_size} values left on stack, expected 1")


class UnknownOperatorError(EvaluationError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Unknown operator '{symbol}'")
