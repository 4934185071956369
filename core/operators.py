"""core/operators.py"""
from enum import Enum
import logging

import numpy as np

from core.errors import UnknownOperatorError

logger = logging.getLogger(__name__)


class Operators:
    """四则运算的静态方法集合，按 IEEE-754 float64 语义计算"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.add(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.subtract(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.multiply(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：不做除零保护，x/0 得到 inf，0/0 得到 nan"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))


class Operator(Enum):
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @property
    def symbol(self):
        return self.value

    @property
    def priority(self):
        """优先级：乘除为2，加减为1"""
        if self in (Operator.MULTIPLY, Operator.DIVIDE):
            return 2
        elif self in (Operator.ADD, Operator.SUBTRACT):
            return 1
        raise UnknownOperatorError(self.value)

    @classmethod
    def from_symbol(cls, symbol):
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorError(symbol) from None

    @classmethod
    def is_operator(cls, symbol):
        return symbol in OPERATOR_SYMBOLS

    def apply(self, left, right):
        """计算 left <op> right，返回 Python float"""
        op_method = _DISPATCH.get(self)
        if op_method is None:
            raise UnknownOperatorError(self.value)
        return float(op_method(left, right))


_DISPATCH = {
    Operator.ADD: Operators.add,
    Operator.SUBTRACT: Operators.sub,
    Operator.MULTIPLY: Operators.mul,
    Operator.DIVIDE: Operators.div,
}

OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)
