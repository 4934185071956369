"""RPN表达式求值器 - 调用统一的Operator枚举"""
import logging

from core.errors import (
    InsufficientOperandsError, MalformedExpressionError, UnknownOperatorError
)
from core.operators import Operator
from utils.metrics import is_number

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(postfix):
        """
        Args:
            postfix: 后缀词素序列
        Returns:
            float 结果（除零按 IEEE-754 得到 inf 或 nan）
        """
        stack = []

        for lexeme in postfix:
            if is_number(lexeme):
                stack.append(float(lexeme))
                continue

            if not Operator.is_operator(lexeme):
                raise UnknownOperatorError(lexeme)
            operator = Operator.from_symbol(lexeme)

            if len(stack) < 2:
                raise InsufficientOperandsError(lexeme, len(stack))
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(operator.apply(operand1, operand2))

        if len(stack) != 1:
            raise MalformedExpressionError(len(stack))

        result = stack[0]
        logger.debug(f"RPN {' '.join(postfix)} = {result}")
        return result


def evaluate(postfix):
    return RPNEvaluator.evaluate(postfix)
