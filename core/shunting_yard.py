"""core/shunting_yard.py - 中缀表达式转后缀（RPN）"""
import logging

from core.errors import UnmatchedParenthesisError, UnknownOperatorError
from core.operators import Operator
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class PostfixConverter:
    """调度场算法：输出序列 + 运算符栈"""

    @staticmethod
    def convert(tokens):
        """
        Args:
            tokens: 已校验的Token序列
        Returns:
            后缀词素元组
        """
        output = []
        operator_stack = []  # 只存放运算符和 '('

        for token in tokens:
            if token.is_numeric:
                output.append(token.lexeme)

            elif token.type == TokenType.OPERATOR:
                incoming = Operator.from_symbol(token.lexeme)
                # 同优先级先弹出栈中的，保证左结合
                while (operator_stack and operator_stack[-1] != '('
                       and Operator.from_symbol(operator_stack[-1]).priority >= incoming.priority):
                    output.append(operator_stack.pop())
                operator_stack.append(token.lexeme)

            elif token.lexeme == '(':
                operator_stack.append(token.lexeme)

            elif token.lexeme == ')':
                while operator_stack and operator_stack[-1] != '(':
                    output.append(operator_stack.pop())
                if not operator_stack:
                    raise UnmatchedParenthesisError(')')
                operator_stack.pop()  # 丢弃 '('

            else:
                raise UnknownOperatorError(token.lexeme)

        while operator_stack:
            top = operator_stack.pop()
            if top == '(':
                raise UnmatchedParenthesisError('(')
            output.append(top)

        postfix = tuple(output)
        logger.debug(f"Postfix: {' '.join(postfix)}")
        return postfix


def to_postfix(tokens):
    return PostfixConverter.convert(tokens)
